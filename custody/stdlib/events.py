from typing import Any, Dict


class Event:
    """A notification for off-system observers. Only published once the call that emitted it commits."""
    def __init__(self, event_name: str, contract: str = '', data: Dict[str, Any] = None):
        self.event_name = event_name
        self.contract = contract
        self.data = data or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'event': self.event_name,
            'contract': self.contract,
            **self.data,
        }

    def __eq__(self, other):
        if not isinstance(other, Event):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return '<{} {}>'.format(self.event_name, self.data)


class TransferEvent(Event):
    def __init__(self, from_account, to, asset_id, contract: str = ''):
        super().__init__(
            event_name='Transfer',
            contract=contract,
            data={'from': from_account, 'to': to, 'asset_id': asset_id},
        )


class ApprovalEvent(Event):
    def __init__(self, holder, delegate, asset_id, contract: str = ''):
        super().__init__(
            event_name='Approval',
            contract=contract,
            data={'holder': holder, 'delegate': delegate, 'asset_id': asset_id},
        )


class ApprovalForAllEvent(Event):
    def __init__(self, principal, operator, granted: bool, contract: str = ''):
        super().__init__(
            event_name='ApprovalForAll',
            contract=contract,
            data={'principal': principal, 'operator': operator, 'granted': granted},
        )
