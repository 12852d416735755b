"""
Cashback Matrix Export Service

A Flask-based HTTP surface over the reconciliation engine. Clients post the
accumulated oracle entries (and optionally a bank configuration) and get back
the reconciled matrix, the spreadsheet table or the cheat sheet as a download.

This service is stateless: every request is reconciled from scratch.
"""

import io
import logging
import os
from datetime import datetime
from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request, send_file

from cashback_engine import (
    run_cashback_reconciliation,
    reconcile,
    export_tabular,
    export_cheat_sheet,
    coerce_raw_entries,
    bank_config_from_dict,
    get_alias_policy,
    DEFAULT_BANK_CONFIG,
    OraclePayloadError,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 16 * 1024 * 1024  # 16MB max request size


class RequestValidationError(Exception):
    """Raised when a request body cannot be turned into pipeline inputs."""
    pass


def require_entries(data: Any) -> list:
    """
    Check that a request body is an object carrying an 'entries' array.

    Raises:
        RequestValidationError: If the body or its entries are malformed
    """
    if not isinstance(data, dict) or 'entries' not in data:
        raise RequestValidationError('No entries provided')
    if not isinstance(data['entries'], list):
        raise RequestValidationError('Entries must be an array')
    return data['entries']


def parse_reconcile_request(data: Any) -> Tuple[list, Dict, Any]:
    """
    Validate a request body and build pipeline inputs.

    Args:
        data: Decoded JSON body

    Returns:
        Tuple of (raw_entries, bank_config, alias_policy)

    Raises:
        RequestValidationError: If entries, config or policy are invalid
    """
    entries = require_entries(data)

    try:
        raw_entries = coerce_raw_entries(entries, source='api')
        config_data = data.get('config')
        config = bank_config_from_dict(config_data) if config_data is not None else dict(DEFAULT_BANK_CONFIG)
        alias_policy = get_alias_policy(data.get('alias_policy'))
    except (OraclePayloadError, ValueError) as e:
        raise RequestValidationError(str(e))

    return raw_entries, config, alias_policy


@app.route('/reconcile', methods=['POST'])
def reconcile_matrix():
    """
    Reconcile posted entries into the cashback matrix.

    Expects JSON body with 'entries' (oracle records) and optional 'config',
    'alias_policy' and 'locale' fields.
    """
    data = request.get_json(silent=True)

    try:
        entries = require_entries(data)
        result = run_cashback_reconciliation(
            entries=entries,
            bank_config=data.get('config'),
            alias_policy=data.get('alias_policy'),
            locale=data.get('locale'),
        )
    except RequestValidationError as e:
        app.logger.warning(f"Reconcile: invalid request: {e}")
        return jsonify({'error': str(e)}), 400
    except (OraclePayloadError, ValueError) as e:
        app.logger.warning(f"Reconcile: invalid input: {e}")
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        app.logger.error(f"Reconcile error: {str(e)}", exc_info=True)
        return jsonify({'error': f'Failed to reconcile: {str(e)}'}), 500

    app.logger.info(
        f"Reconcile: {len(entries)} entries -> {len(result['rows'])} rows"
    )
    return jsonify(result)


@app.route('/export/tsv', methods=['POST'])
def export_tsv():
    """
    Export the reconciled matrix as tab-separated text.

    Expects the same JSON body as /reconcile.
    """
    data = request.get_json(silent=True)

    try:
        raw_entries, config, alias_policy = parse_reconcile_request(data)
        result = reconcile(raw_entries, config, alias_policy=alias_policy)
        tsv_data = export_tabular(result, locale=data.get('locale')).encode('utf-8')
    except RequestValidationError as e:
        app.logger.warning(f"TSV export: {e}")
        return jsonify({'error': str(e)}), 400
    except ValueError as e:
        app.logger.warning(f"TSV export: invalid option: {e}")
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        app.logger.error(f"TSV export error: {str(e)}", exc_info=True)
        return jsonify({'error': f'Failed to export TSV: {str(e)}'}), 500

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    filename = f'cashback_matrix_{timestamp}.tsv'

    app.logger.info(f"TSV export: Successfully exported {len(result.rows)} rows")

    return send_file(
        io.BytesIO(tsv_data),
        mimetype='text/tab-separated-values',
        as_attachment=True,
        download_name=filename
    )


@app.route('/export/cheat-sheet', methods=['POST'])
def export_cheat_sheet_file():
    """
    Export the cheat sheet of winning banks as a text file.

    Expects the same JSON body as /reconcile.
    """
    data = request.get_json(silent=True)

    try:
        raw_entries, config, alias_policy = parse_reconcile_request(data)
        result = reconcile(raw_entries, config, alias_policy=alias_policy)
        text_data = export_cheat_sheet(result, locale=data.get('locale')).encode('utf-8')
    except RequestValidationError as e:
        app.logger.warning(f"Cheat sheet export: {e}")
        return jsonify({'error': str(e)}), 400
    except ValueError as e:
        app.logger.warning(f"Cheat sheet export: invalid option: {e}")
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        app.logger.error(f"Cheat sheet export error: {str(e)}", exc_info=True)
        return jsonify({'error': f'Failed to export cheat sheet: {str(e)}'}), 500

    app.logger.info(
        f"Cheat sheet export: {len(result.winning_rows)} categories with a winner"
    )

    return send_file(
        io.BytesIO(text_data),
        mimetype='text/plain',
        as_attachment=True,
        download_name='cashback_pamyatka.txt'
    )


if __name__ == '__main__':
    print("=" * 80)
    print("Cashback Matrix Export Service")
    print("=" * 80)
    print("\nStarting service on http://localhost:5001")
    print("\nPress Ctrl+C to stop the server.")
    print("=" * 80)

    # Set FLASK_DEBUG=1 only in development environments
    debug_mode = os.environ.get('FLASK_DEBUG', '0') == '1'
    if debug_mode:
        print("\n⚠️  WARNING: Running in DEBUG mode. Not suitable for production!")
        print("=" * 80)

    app.run(debug=debug_mode, port=5001, host='0.0.0.0')
