from custody.execution.runtime import rt
from custody.db.driver import ContractDriver
from custody.exceptions import RegistryError, UnknownFunction
from custody.stdlib.access import is_exported
from custody import config
from custody.logger import get_logger
from copy import deepcopy
import traceback

log = get_logger('Executor')


class Executor:
    """
    Runs one registry function per call as an all-or-nothing unit of work.

    A call made while another is in flight (a receiver hook calling back in,
    on this registry or another one) joins the outer unit of work. Its failure
    only unwinds its own writes. Nothing is committed until the outer call
    succeeds, and then every registry the call touched commits.
    """
    def __init__(self, contract, driver=None, bypass_privates=False):
        self.contract = contract

        self.driver = driver

        if not self.driver:
            self.driver = ContractDriver()

        self.bypass_privates = bypass_privates

        self.events = []
        self.pending_events = []
        self.subscribers = []

    def subscribe(self, callback):
        self.subscribers.append(callback)

    def _resolve(self, function_name):
        func = getattr(self.contract, function_name, None)

        if self.bypass_privates and callable(func):
            return func

        if function_name.startswith(config.PRIVATE_METHOD_PREFIX) or not is_exported(func):
            raise UnknownFunction(function_name=function_name)

        return func

    def commit(self):
        self.driver.commit()

        events, self.pending_events = self.pending_events, []
        self._publish(events)

    def rollback(self):
        self.driver.rollback()
        self.pending_events = []

    def _publish(self, events):
        self.events.extend(events)
        for callback in self.subscribers:
            for event in events:
                callback(event)

    def execute(self, sender, function_name, kwargs, auto_commit=False) -> dict:
        nested = rt.depth > 0

        state = {
            'signer': rt.context.signer if nested else sender,
            'caller': sender,
            'this': self.contract.address
        }

        if not nested:
            rt.set_up(state)

        rt.join(self)
        savepoint = rt.savepoint()
        _, mark = savepoint

        log.debug('{} -> {}.{}({}) depth={}'.format(sender, self.contract.address, function_name, kwargs, rt.depth))

        rt.depth += 1
        pushed = False
        try:
            if nested:
                rt.context._add_state(state)
                pushed = True

            func = self._resolve(function_name)
            result = func(**kwargs)
            status_code = 0
        except RegistryError as e:
            result = e
            status_code = 1
            log.warning('{} failed: {}'.format(function_name, e))
        except Exception as e:
            result = e
            status_code = 1
            log.error(str(e))
            log.error(traceback.format_exc())
        finally:
            rt.depth -= 1
            if pushed:
                rt.context._pop_state()

        if status_code == 1:
            rt.revert(savepoint)

        ### EXECUTION END

        events = list(rt.events[mark:])

        output = {
            'status_code': status_code,
            'result': result,
            'writes': deepcopy(self.driver.pending_writes),
            'events': events,
        }

        if not nested:
            participants = list(rt.participants)
            rt.clean_up()

            if status_code == 0:
                # Every registry touched by the call commits together, each publishing its own events
                for executor in participants:
                    executor.pending_events.extend(e for e in events if e.contract == executor.contract.address)

                if auto_commit:
                    for executor in participants:
                        executor.commit()

        return output
