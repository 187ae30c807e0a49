class RegistryError(Exception):
    """
    The base exception for the custody registry. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class InvalidAccount(RegistryError):
    """
    The null account was passed where a real account is required

    :ivar account: The account that was passed
    :ivar action: What was attempted with it
    """
    fmt = "Cannot {action} the null account '{account}'"


class UnknownAsset(RegistryError):
    """
    The asset identifier is not the one this registry tracks

    :ivar asset_id: The identifier that was asked for
    """
    fmt = "Asset '{asset_id}' does not exist"


class InvalidDelegate(RegistryError):
    """
    Attempted to make the current holder the delegate of its own asset

    :ivar holder: The current holder
    """
    fmt = "Cannot set the current holder '{holder}' as delegate"


class Unauthorized(RegistryError):
    """
    The caller holds none of the rights needed for the action

    :ivar account: The calling account
    :ivar action: What the caller attempted
    """
    fmt = "Account '{account}' is not authorized to {action}"


class SelfDelegation(RegistryError):
    """
    An account tried to make itself its own operator

    :ivar account: The calling account
    """
    fmt = "Account '{account}' cannot grant operator status to itself"


class OwnershipMismatch(RegistryError):
    """
    The transfer source is not the current holder

    :ivar from_account: The claimed source of the transfer
    :ivar holder: The actual holder
    """
    fmt = "Transfer from '{from_account}' but the asset is held by '{holder}'"


class InvalidRecipient(RegistryError):
    """
    The transfer destination is the null account

    :ivar to: The destination that was passed
    """
    fmt = "Cannot transfer to the null account '{to}'"


class RecipientRejected(RegistryError):
    """
    The recipient answered the acknowledgment hook with something other than
    the acceptance value

    :ivar recipient: The recipient account
    :ivar value: The value the hook returned
    """
    fmt = "Recipient '{recipient}' rejected the asset (returned {value!r})"


class CallFailure(RegistryError):
    """
    The acknowledgment hook failed. The reason it reported is the message,
    verbatim.

    :ivar reason: The failure reason
    """
    fmt = '{reason}'


class UnknownFunction(RegistryError):
    """
    The function is private, not exported or does not exist

    :ivar function_name: The name that was called
    """
    fmt = "Function '{function_name}' is not callable"


class AlreadyConstructed(RegistryError):
    """
    The registry state has already been seeded

    :ivar address: The registry address
    """
    fmt = "Registry '{address}' is already constructed"


class CallDepthExceeded(RegistryError):
    """
    Reentrant calls nested deeper than allowed

    :ivar limit: The maximum depth
    """
    fmt = 'Call depth exceeded the limit of {limit}'
