from ..client import RegistryClient
from ..db.encoder import to_json_safe

import inspect

client = RegistryClient()

NO_VARIABLE = 2


def get_var(variable: str, key=None):
    # Hashes keyed by several parts take a list, one entry per part
    if key is None:
        arguments = []
    elif isinstance(key, list):
        arguments = key
    else:
        arguments = [key]

    response = client.get_var(variable, arguments)

    if response is None:
        return {
            'status': NO_VARIABLE
        }

    return {
        'value': to_json_safe(response)
    }


def get_vars():
    return {
        'values': to_json_safe(client.raw_driver.items(client.address + client.raw_driver.delimiter))
    }


def get_methods():
    funcs = []
    for name in client.functions:
        func = getattr(client.registry, name)
        kwargs = [p for p in inspect.signature(func).parameters]

        funcs.append({
            'name': name,
            'arguments': kwargs
        })

    return funcs


def _coerce_kwargs(kwargs: dict):
    # Hook payloads arrive as hex strings over JSON
    if isinstance(kwargs.get('data'), str):
        kwargs = dict(kwargs, data=bytes.fromhex(kwargs['data']))
    return kwargs


def _render(output: dict):
    result = output['result']

    if output['status_code'] == 1:
        result = {
            'error': type(result).__name__,
            'message': str(result)
        }

    return {
        'status_code': output['status_code'],
        'result': to_json_safe(result)
    }


def run(transaction: dict):
    sender = transaction.get('sender')
    function = transaction.get('function')

    if sender is None or function is None:
        return {
            'status_code': 1,
            'result': {'error': 'MalformedTransaction', 'message': 'sender and function are required'}
        }

    try:
        kwargs = _coerce_kwargs(transaction.get('kwargs') or {})
    except ValueError as e:
        return {
            'status_code': 1,
            'result': {'error': 'MalformedTransaction', 'message': str(e)}
        }

    output = client.execute(function, signer=sender, **kwargs)
    return _render(output)


def run_all(transactions: list):
    return [run(tx) for tx in transactions]


# String to callable map for strict RPC capabilities. Explicit for a reason!
command_map = {
    'get_var': get_var,
    'get_vars': get_vars,
    'get_methods': get_methods,
    'run': run,
    'run_all': run_all,
}


# Single function call to map RPC command to an actual Python function. Allows the server to just call this.
def process_json_rpc_command(payload: dict):
    command = payload.get('command')
    arguments = payload.get('arguments')

    if command is None or arguments is None:
        return

    func = command_map.get(command)

    if func is None:
        return

    return func(**arguments)
