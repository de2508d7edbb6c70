import os
import asyncio
import math
from flask import Flask, render_template, request, jsonify
import logging
from typing import Any
import aiohttp
from ipview.config import get_field_label, REQUEST_TIMEOUT
from ipview.pipeline import lookup_ip_info

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)

console_handler = logging.StreamHandler()
console_handler.setLevel(logging.DEBUG)
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
console_handler.setFormatter(formatter)
logger.addHandler(console_handler)

logging.getLogger('ipview').setLevel(logging.INFO)
logging.getLogger('ipview').addHandler(console_handler)

app = Flask(__name__)
app.config['TEMPLATES_AUTO_RELOAD'] = True
app.config['SEND_FILE_MAX_AGE_DEFAULT'] = 0
app.config['DEBUG'] = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'
app.config['REQUEST_TIMEOUT'] = REQUEST_TIMEOUT
# Keep the card order in JSON responses
app.json.sort_keys = False

LOOKUP_ERROR = 'Could not retrieve IP information. Please try again later.'

# Network failures, timeouts and undecodable (non-JSON) response bodies
LOOKUP_FAILURES = (aiohttp.ClientError, asyncio.TimeoutError, ValueError)


def display_value(value: Any) -> str:
    """Render a record value as card text"""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and math.isnan(value):
        return 'NaN'
    return str(value)


@app.context_processor
def inject_helpers():
    return dict(
        field_label=get_field_label,
        display_value=display_value
    )


@app.route('/', methods=['GET'])
async def index():
    """Main page: geolocation cards for the visitor's (or the requested) IP"""
    ip_override = request.args.get('ip')

    try:
        record = await lookup_ip_info(ip_override, timeout=app.config['REQUEST_TIMEOUT'])
    except LOOKUP_FAILURES as e:
        logger.error(f"IP lookup failed for {ip_override or 'this host'}: {str(e)}")
        # SECURITY: Don't expose internal error details to client
        return render_template('index.html', record=None, error=LOOKUP_ERROR), 502

    return render_template('index.html', record=record, error=None)


@app.route('/api/lookup', methods=['GET'])
async def api_lookup():
    """Same lookup as the page, as JSON"""
    ip_override = request.args.get('ip')

    try:
        record = await lookup_ip_info(ip_override, timeout=app.config['REQUEST_TIMEOUT'])
    except LOOKUP_FAILURES as e:
        logger.error(f"IP lookup failed for {ip_override or 'this host'}: {str(e)}")
        return jsonify({'error': LOOKUP_ERROR}), 502

    if record is None:
        return jsonify({'ip': None, 'record': None, 'flag_url': None})

    return jsonify({
        'ip': record.ip,
        'record': record.to_dict(),
        'flag_url': record.flag_url
    })


if __name__ == '__main__':
    app.run(debug=app.config['DEBUG'], use_reloader=False)
