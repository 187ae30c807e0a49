from custody.db.driver import ContractDriver


class Datum:
    def __init__(self, contract, name, driver: ContractDriver):
        self._driver = driver
        self._contract = contract
        self._name = name
        self._key = self._driver.make_key(contract, name)


class Variable(Datum):
    """A single stored value. Setting it to None removes it from storage."""
    def set(self, value):
        self._driver.set(self._key, value)

    def get(self):
        return self._driver.get(self._key)


class Hash(Datum):
    """
    Stored values addressed by one key (``h['uri']``) or a tuple of keys
    (``h['stu', 'colin']``). Key parts are any JSON values and are stored
    encoded, so accounts with separators in them are safe to use.
    """
    def __init__(self, contract, name, driver: ContractDriver, default_value=None):
        super().__init__(contract, name, driver=driver)
        self._default_value = default_value

    def _key_for(self, key):
        parts = list(key) if isinstance(key, tuple) else [key]
        assert len(parts) > 0, 'Hash keys need at least one part.'

        return self._driver.make_key(self._contract, self._name, parts)

    def __setitem__(self, key, value):
        self._driver.set(self._key_for(key), value)

    def __getitem__(self, key):
        value = self._driver.get(self._key_for(key))

        if value is None:
            return self._default_value

        return value
