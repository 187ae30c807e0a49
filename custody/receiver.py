"""
Recipient acknowledgment for guarded transfers.

A recipient is "contract-like" when a receiver object is registered for its
address in a :class:`ReceiverDirectory`. Receivers implement::

    def on_asset_received(self, operator, from_account, asset_id, data) -> bytes

and must return :data:`RECEIVER_MAGIC` to accept the asset. The hook runs
untrusted code, so invoking it never raises: every outcome comes back as a
:class:`HookResult`.
"""
import enum

from custody import config
from custody.logger import get_logger
from custody.stdlib.hashing import selector

RECEIVER_MAGIC = selector(config.RECEIVER_HOOK_SIGNATURE)

log = get_logger('Receiver')


class HookStatus(enum.Enum):
    ACCEPTED = 'accepted'
    FAILED = 'failed'
    NOT_IMPLEMENTED = 'not_implemented'


class HookResult:
    def __init__(self, status: HookStatus, value: bytes = None, reason: str = None):
        self.status = status
        self.value = value
        self.reason = reason

    @classmethod
    def accepted(cls, value):
        return cls(HookStatus.ACCEPTED, value=value)

    @classmethod
    def failed(cls, reason=None):
        return cls(HookStatus.FAILED, reason=reason)

    @classmethod
    def not_implemented(cls):
        return cls(HookStatus.NOT_IMPLEMENTED)

    @property
    def ok(self):
        return self.status is HookStatus.ACCEPTED

    def failure_reason(self):
        if self.ok:
            return None
        return self.reason or config.RECEIVER_NOT_IMPLEMENTED

    def __repr__(self):
        return '<HookResult {} value={!r} reason={!r}>'.format(self.status.value, self.value, self.reason)


class ReceiverDirectory:
    def __init__(self):
        self._receivers = {}

    def register(self, address, receiver):
        self._receivers[address] = receiver

    def unregister(self, address):
        self._receivers.pop(address, None)

    def is_contract(self, address) -> bool:
        return address in self._receivers

    def invoke_receiver_hook(self, operator, from_account, to, asset_id, data) -> HookResult:
        receiver = self._receivers.get(to)
        hook = getattr(receiver, config.RECEIVER_HOOK_NAME, None)

        if not callable(hook):
            return HookResult.not_implemented()

        try:
            value = hook(operator, from_account, asset_id, data)
        except Exception as e:
            log.debug('Receiver {} failed: {}'.format(to, e))
            return HookResult.failed(reason=str(e) or None)

        return HookResult.accepted(value)
