import json
from custody.config import INDEX_SEPARATOR, DELIMITER

##
# ENCODER CLASS
# Add to this to encode Python types for storage.
# Right now, this is only for bytes (hook payloads, acceptance values). They are stored as dicts of hex strings.
##


class Encoder(json.JSONEncoder):
    def default(self, o, *args):
        if isinstance(o, (bytes, bytearray)):
            return {
                '__bytes__': bytes(o).hex()
            }
        return super().default(o)


# JSON library from Python 3 doesn't let you instantiate your custom Encoder. You have to pass it as an obj to json
def encode(data):
    return json.dumps(data, cls=Encoder, separators=(',', ':'))


def as_object(d):
    if '__bytes__' in d:
        return bytes.fromhex(d['__bytes__'])
    return dict(d)


# Decode has a hook for JSON objects, which are just Python dictionaries. You have to specify the logic in this hook.
def decode(data):
    if data is None:
        return None

    if isinstance(data, bytes):
        data = data.decode()

    try:
        return json.loads(data, object_hook=as_object)
    except json.decoder.JSONDecodeError:
        return None


def encode_key_part(part):
    # JSON keeps None, 1 and '1' apart. The separators are escaped so an account can never split a key
    return encode(part).replace(DELIMITER, '\\u003a').replace(INDEX_SEPARATOR, '\\u002e')


def make_key(contract, variable, args=[]):
    contract_variable = INDEX_SEPARATOR.join((contract, variable))
    if args:
        return DELIMITER.join((contract_variable, *[encode_key_part(arg) for arg in args]))
    return contract_variable


def to_json_safe(value):
    """Replaces bytes (at any depth) with hex strings so a value can be handed to a JSON response."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    if isinstance(value, dict):
        return {k: to_json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_safe(v) for v in value]
    return value
