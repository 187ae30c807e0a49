from custody import config
from custody.exceptions import CallDepthExceeded


class Context:
    def __init__(self, base_state, maxlen=config.RECURSION_LIMIT):
        self._state = []
        self._base_state = base_state
        self._maxlen = maxlen

    def _get_state(self):
        if len(self._state) == 0:
            return self._base_state
        return self._state[-1]

    def _add_state(self, state: dict):
        if len(self._state) >= self._maxlen:
            raise CallDepthExceeded(limit=self._maxlen)
        self._state.append(state)

    def _pop_state(self):
        if len(self._state) > 0:
            self._state.pop(-1)

    def _reset(self):
        self._state = []

    @property
    def depth(self):
        return len(self._state)

    @property
    def this(self):
        return self._get_state()['this']

    @property
    def caller(self):
        return self._get_state()['caller']

    @property
    def signer(self):
        return self._get_state()['signer']


_context = Context({
        'this': None,
        'caller': None,
        'signer': None
    })




class Runtime:
    """
    State shared by every executor in the process for the unit of work in
    progress. A call made while another is running (from a receiver hook) joins
    the running unit of work, whichever registry it is made on.
    """
    # Notifications emitted by the unit of work in progress. Published by the executors on commit.
    events = []

    context = _context

    # Executors taking part in the unit of work, each with the driver savepoint it joined at
    participants = {}

    # Calls in flight
    depth = 0

    @classmethod
    def set_up(cls, base_state):
        cls.context._reset()
        cls.context._base_state = base_state
        cls.events = []
        cls.participants = {}
        cls.depth = 0

    @classmethod
    def clean_up(cls):
        cls.set_up({
            'this': None,
            'caller': None,
            'signer': None
        })

    @classmethod
    def emit(cls, event):
        cls.events.append(event)

    @classmethod
    def event_mark(cls):
        return len(cls.events)

    @classmethod
    def revert_events(cls, mark):
        del cls.events[mark:]

    @classmethod
    def join(cls, executor):
        if executor not in cls.participants:
            cls.participants[executor] = executor.driver.savepoint()

    @classmethod
    def savepoint(cls):
        writes = {executor: executor.driver.savepoint() for executor in cls.participants}
        return writes, cls.event_mark()

    @classmethod
    def revert(cls, savepoint):
        writes, mark = savepoint

        # Latest joiner first so that executors sharing a driver end on the earliest savepoint
        for executor in reversed(list(cls.participants)):
            executor.driver.revert(writes.get(executor, cls.participants[executor]))

        cls.revert_events(mark)


rt = Runtime()
