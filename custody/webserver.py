from sanic import Sanic
from sanic.response import json, text
from custody.server import rpc
from custody.exceptions import UnknownAsset
from custody.db.encoder import to_json_safe
from custody.logger import get_logger
from custody import config

WEB_SERVER_PORT = 8080
NUM_WORKERS = 1

app = Sanic('custody')
client = rpc.client

log = get_logger('Webserver')


def _call(func, **kwargs):
    output = client.execute(func, **kwargs)

    if output['status_code'] == 1:
        e = output['result']
        status = 404 if isinstance(e, UnknownAsset) else 400
        return None, json({'error': str(e)}, status=status)

    return to_json_safe(output['result']), None


@app.route("/", methods=["GET",])
async def index(request):
    return text("I\'m a teapot", status=418)


@app.route('/asset', methods=['GET'])
async def get_asset(request):
    summary = {'asset_id': config.ASSET_ID}

    for field, func, kwargs in (('name', 'name', {}),
                                ('symbol', 'symbol', {}),
                                ('uri', 'uri_of', {'asset_id': config.ASSET_ID}),
                                ('holder', 'holder_of', {'asset_id': config.ASSET_ID}),
                                ('delegate', 'delegate_of', {'asset_id': config.ASSET_ID})):
        value, error = _call(func, **kwargs)
        if error is not None:
            return error
        summary[field] = value

    return json(summary, status=200)


@app.route('/asset/<asset_id:int>/holder', methods=['GET'])
async def get_holder(request, asset_id):
    value, error = _call('holder_of', asset_id=asset_id)
    return error or json({'holder': value}, status=200)


@app.route('/asset/<asset_id:int>/delegate', methods=['GET'])
async def get_delegate(request, asset_id):
    value, error = _call('delegate_of', asset_id=asset_id)
    return error or json({'delegate': value}, status=200)


@app.route('/asset/<asset_id:int>/uri', methods=['GET'])
async def get_uri(request, asset_id):
    value, error = _call('uri_of', asset_id=asset_id)
    return error or json({'uri': value}, status=200)


@app.route('/accounts/<account>/holdings', methods=['GET'])
async def get_holdings(request, account):
    value, error = _call('holding_count_of', account=account)
    return error or json({'holdings': value}, status=200)


@app.route('/operators/<principal>/<operator>', methods=['GET'])
async def get_operator(request, principal, operator):
    value, error = _call('is_operator', principal=principal, candidate=operator)
    return error or json({'granted': value}, status=200)


@app.route('/methods', methods=['GET'])
async def get_methods(request):
    return json({'methods': rpc.get_methods()}, status=200)


@app.route('/events', methods=['GET'])
async def get_events(request):
    return json({'events': [to_json_safe(e.to_dict()) for e in client.events]}, status=200)


# Expects json object such that:
'''
{
    'command': 'run',
    'arguments': {'transaction': {'sender': 'stu', 'function': 'transfer', 'kwargs': {...}}}
}
'''
@app.route('/rpc', methods=['POST'])
async def json_rpc(request):
    payload = request.json

    if not isinstance(payload, dict):
        return json({'error': 'malformed payload'}, status=400)

    try:
        response = rpc.process_json_rpc_command(payload)
    except (TypeError, ValueError) as e:
        log.warning('Bad RPC payload {}: {}'.format(payload, e))
        return json({'error': str(e)}, status=400)

    if response is None:
        return json({'error': 'malformed payload'}, status=400)

    return json(response, status=200)


def start_webserver():
    app.run(host='0.0.0.0', port=WEB_SERVER_PORT, workers=NUM_WORKERS, debug=False, access_log=False)


if __name__ == '__main__':
    start_webserver()
