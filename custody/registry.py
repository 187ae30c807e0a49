"""
Authorization and ownership transfer for a single asset.

Rights over the asset form a lattice: the holder, then any operator the holder
has approved for all of its assets, then the single delegate approved for this
asset. Nobody else may move it. The delegate is cleared on every change of
holder; operator grants belong to accounts and survive transfers.

Methods read the calling account from the runtime context, so they are meant
to be run by :class:`custody.execution.executor.Executor` (see
:class:`custody.client.RegistryClient`).
"""
from custody import config
from custody.db.driver import ContractDriver
from custody.db.orm import Variable, Hash
from custody.exceptions import (
    AlreadyConstructed,
    CallFailure,
    InvalidAccount,
    InvalidDelegate,
    InvalidRecipient,
    OwnershipMismatch,
    RecipientRejected,
    SelfDelegation,
    Unauthorized,
    UnknownAsset,
)
from custody.receiver import RECEIVER_MAGIC, ReceiverDirectory
from custody.stdlib.access import ctx, export, is_exported
from custody.stdlib.events import ApprovalEvent, ApprovalForAllEvent, TransferEvent
from custody.execution.runtime import rt


def is_null_account(account):
    return account is None or account == ''


class SingleAssetRegistry:
    def __init__(self, address=config.REGISTRY_NAME, driver: ContractDriver = None,
                 receivers: ReceiverDirectory = None):
        assert not is_null_account(address), 'Registry address cannot be null.'

        self.address = address
        self.driver = driver or ContractDriver()
        self.receivers = receivers or ReceiverDirectory()

        self.holder = Variable(address, config.HOLDER_KEY, driver=self.driver)
        self.delegate = Variable(address, config.DELEGATE_KEY, driver=self.driver)
        self.operators = Hash(address, config.OPERATORS_KEY, driver=self.driver, default_value=False)
        self.metadata = Hash(address, config.METADATA_KEY, driver=self.driver)

    def construct(self, name='', symbol='', uri=''):
        # Construction is minting to self
        if self.is_constructed():
            raise AlreadyConstructed(address=self.address)

        self.metadata['name'] = name
        self.metadata['symbol'] = symbol
        self.metadata['uri'] = uri

        self.holder.set(self.address)
        rt.emit(TransferEvent(None, self.address, config.ASSET_ID, contract=self.address))

    def is_constructed(self):
        return self.holder.get() is not None

    def require_exists(self, asset_id):
        if type(asset_id) is not int or asset_id != config.ASSET_ID:
            raise UnknownAsset(asset_id=asset_id)

    # Queries

    @export
    def name(self):
        return self.metadata['name']

    @export
    def symbol(self):
        return self.metadata['symbol']

    @export
    def holding_count_of(self, account):
        if is_null_account(account):
            raise InvalidAccount(account=account, action='count holdings of')

        return 1 if account == self.holder.get() else 0

    @export
    def holder_of(self, asset_id):
        self.require_exists(asset_id)
        return self.holder.get()

    @export
    def uri_of(self, asset_id):
        self.require_exists(asset_id)
        return self.metadata['uri']

    @export
    def delegate_of(self, asset_id):
        self.require_exists(asset_id)
        return self.delegate.get()

    @export
    def is_operator(self, principal, candidate):
        return self.operators[principal, candidate] is True

    @export
    def may_transfer(self, spender, asset_id):
        self.require_exists(asset_id)
        holder = self.holder.get()
        delegate = self.delegate.get()

        return spender == holder or \
            self.is_operator(holder, spender) or \
            (not is_null_account(delegate) and spender == delegate)

    # Authorization

    @export
    def set_delegate(self, target, asset_id):
        self.require_exists(asset_id)
        holder = self.holder.get()

        if target == holder:
            raise InvalidDelegate(holder=holder)

        if ctx.caller != holder and not self.is_operator(holder, ctx.caller):
            raise Unauthorized(account=ctx.caller, action='set the delegate')

        if is_null_account(target):
            target = None

        self.delegate.set(target)
        rt.emit(ApprovalEvent(holder, target, asset_id, contract=self.address))

    @export
    def set_operator_delegation(self, operator, granted):
        if is_null_account(operator):
            raise InvalidAccount(account=operator, action='grant operator status to')

        if operator == ctx.caller:
            raise SelfDelegation(account=ctx.caller)

        granted = bool(granted)
        self.operators[ctx.caller, operator] = granted
        rt.emit(ApprovalForAllEvent(ctx.caller, operator, granted, contract=self.address))

    # Transfers

    @export
    def transfer(self, from_account, to, asset_id):
        if not self.may_transfer(ctx.caller, asset_id):
            raise Unauthorized(account=ctx.caller, action='transfer asset {}'.format(asset_id))

        self._transfer(from_account, to, asset_id)

    def _transfer(self, from_account, to, asset_id):
        self.require_exists(asset_id)
        holder = self.holder.get()

        if from_account != holder:
            raise OwnershipMismatch(from_account=from_account, holder=holder)

        if is_null_account(to):
            raise InvalidRecipient(to=to)

        # The delegate is cleared before the holder changes and the event goes out last
        self.delegate.set(None)
        self.holder.set(to)

        rt.emit(TransferEvent(from_account, to, asset_id, contract=self.address))

    @export
    def safe_transfer(self, from_account, to, asset_id, data=b''):
        """
        Transfers and then asks a contract-like recipient to acknowledge.

        Ownership is already updated when the hook runs, so anything the
        recipient calls back into sees the new holder. A failed acknowledgment
        fails the whole call, and the executor discards the transfer with it.
        """
        self.transfer(from_account, to, asset_id)

        if not self.receivers.is_contract(to):
            return

        result = self.receivers.invoke_receiver_hook(ctx.caller, from_account, to, asset_id, data)

        if not result.ok:
            raise CallFailure(reason=result.failure_reason())

        if result.value != RECEIVER_MAGIC:
            raise RecipientRejected(recipient=to, value=result.value)

    def exported_functions(self):
        return sorted(n for n in dir(self)
                      if not n.startswith(config.PRIVATE_METHOD_PREFIX)
                      and is_exported(getattr(self, n)))
