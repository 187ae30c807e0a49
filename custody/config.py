DELIMITER = ':'
INDEX_SEPARATOR = '.'

# Maximum depth of the call context stack. Reentrant calls from receiver hooks count against it.
RECURSION_LIMIT = 64

PRIVATE_METHOD_PREFIX = '_'

REGISTRY_NAME = 'registry'

# The one asset this registry tracks
ASSET_ID = 1

HOLDER_KEY = 'holder'
DELEGATE_KEY = 'delegate'
OPERATORS_KEY = 'operators'
METADATA_KEY = 'metadata'

RECEIVER_HOOK_NAME = 'on_asset_received'
RECEIVER_HOOK_SIGNATURE = '{}(operator,from_account,asset_id,data)'.format(RECEIVER_HOOK_NAME)
RECEIVER_NOT_IMPLEMENTED = 'Recipient does not implement the acknowledgment interface'
