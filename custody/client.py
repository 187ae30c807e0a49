from custody.execution.executor import Executor
from custody.db.driver import ContractDriver
from custody.registry import SingleAssetRegistry
from custody.receiver import ReceiverDirectory
from custody import config
from functools import partial


class RegistryClient:
    """
    Entry point for working with a registry.

    Every exported registry function is available as a method that takes the
    function's arguments as keywords plus an optional ``signer``, the account
    the call is made on behalf of::

        client = RegistryClient(signer='stu', name='N', symbol='S', uri='U0')
        client.set_delegate(target='colin', asset_id=1, signer='registry')

    A failed call raises the registry error it failed with and leaves state
    untouched. If the driver already holds state for ``address`` the client
    attaches to it instead of constructing a new registry.
    """
    def __init__(self, signer='sys',
                 address=config.REGISTRY_NAME,
                 name='',
                 symbol='',
                 uri='',
                 driver=None,
                 receivers=None):

        self.raw_driver = driver or ContractDriver()
        self.receivers = receivers or ReceiverDirectory()
        self.signer = signer
        self.metadata = {'name': name, 'symbol': symbol, 'uri': uri}

        self.registry = SingleAssetRegistry(address=address, driver=self.raw_driver, receivers=self.receivers)
        self.executor = Executor(contract=self.registry, driver=self.raw_driver)

        self.functions = self.registry.exported_functions()

        # each function is a partial that allows signer overriding
        for func in self.functions:
            setattr(self, func, partial(self._abstract_function_call, func=func))

        if not self.registry.is_constructed():
            self.run_private_function('construct', **self.metadata)

    def flush(self):
        # flushes db and reconstructs the registry
        self.raw_driver.flush()
        self.executor.rollback()
        self.executor.events.clear()

        self.run_private_function('construct', **self.metadata)

    @property
    def address(self):
        return self.registry.address

    @property
    def events(self):
        return self.executor.events

    def subscribe(self, callback):
        self.executor.subscribe(callback)

    def keys(self):
        return self.raw_driver.get_contract_keys(self.address)

    def get_var(self, variable, arguments=[]):
        return self.raw_driver.get_var(self.address, variable, arguments)

    def execute(self, func, signer=None, **kwargs) -> dict:
        return self.executor.execute(sender=signer or self.signer,
                                     function_name=func,
                                     kwargs=kwargs,
                                     auto_commit=True)

    def run_private_function(self, f, signer=None, **kwargs):
        # Let executor access private functions
        self.executor.bypass_privates = True

        try:
            return self._abstract_function_call(func=f, signer=signer, **kwargs)
        finally:
            # Set executor back to restricted mode
            self.executor.bypass_privates = False

    def _abstract_function_call(self, func, signer=None, **kwargs):
        output = self.execute(func, signer=signer, **kwargs)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']
