from custody.db.encoder import encode, decode, make_key
from custody import config
from custody.logger import get_logger

# DB maps bytes to bytes
# Driver maps string to python object


class InMemDriver:
    def __init__(self):
        self.db = {}

    def get(self, item: str):
        key = item.encode()
        return decode(self.db.get(key))

    def set(self, key: str, value):
        k = key.encode()
        if value is None:
            self.__delitem__(key)
        else:
            self.db[k] = encode(value).encode()

    def delete(self, key: str):
        self.__delitem__(key)

    def iter(self, prefix: str, length=0):
        p = prefix.encode()

        l = []
        for k in sorted(self.db.keys()):
            if k.startswith(p):
                l.append(k.decode())
            if 0 < length <= len(l):
                break

        return l

    def keys(self):
        return sorted([k.decode() for k in self.db.keys()])

    def flush(self):
        self.db.clear()

    def __getitem__(self, item: str):
        value = self.get(item)
        if value is None:
            raise KeyError(item)
        return value

    def __setitem__(self, key: str, value):
        self.set(key, value)

    def __delitem__(self, key: str):
        k = key.encode()
        try:
            del self.db[k]
        except KeyError:
            pass


class CacheDriver:
    def __init__(self, driver=None):
        self.pending_writes = {}  # L2 cache
        self.cache = {}  # L1 cache
        self.driver = driver or InMemDriver()  # L0 cache
        self.log = get_logger('Driver')

    def find(self, key: str):
        # A pending None is a pending delete and must shadow the lower layers
        if key in self.pending_writes:
            return self.pending_writes[key]

        if key in self.cache:
            return self.cache[key]

        value = self.driver.get(key)
        self.cache[key] = value

        return value

    def get(self, key: str):
        return self.find(key)

    def set(self, key, value):
        self.pending_writes[key] = value

    def delete(self, key):
        self.set(key, None)

    def savepoint(self):
        return dict(self.pending_writes)

    def revert(self, savepoint):
        # Drops every write made after the savepoint was taken
        self.log.debug('Reverting {} pending writes to savepoint of {}'.format(
            len(self.pending_writes), len(savepoint)))
        self.pending_writes = dict(savepoint)

    def commit(self):
        self.log.debug('Committing {} writes'.format(len(self.pending_writes)))

        for k, v in self.pending_writes.items():
            if v is None:
                self.driver.delete(k)
            else:
                self.driver.set(k, v)

        self.cache.clear()
        self.pending_writes.clear()

    def rollback(self):
        # Returns to disk state which should be whatever it was prior to any write sessions
        self.log.debug('Rolling back {} pending writes'.format(len(self.pending_writes)))
        self.cache.clear()
        self.pending_writes.clear()

    def clear_pending_state(self):
        self.rollback()


class ContractDriver(CacheDriver):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.delimiter = config.INDEX_SEPARATOR

    def items(self, prefix=''):
        # Get all of the items in the cache currently
        _items = {}
        keys = set()

        for k, v in self.pending_writes.items():
            if k.startswith(prefix):
                keys.add(k)
                if v is not None:
                    _items[k] = v

        # Get all of the keys we need
        db_keys = set(self.driver.iter(prefix=prefix))

        # Subtract the already gotten keys
        for k in db_keys - keys:
            _items[k] = self.get(k)

        return dict(sorted(_items.items()))

    def keys(self, prefix=''):
        return list(self.items(prefix).keys())

    def values(self, prefix=''):
        return list(self.items(prefix).values())

    def make_key(self, contract, variable, args=[]):
        return make_key(contract, variable, args)

    def get_var(self, contract, variable, arguments=[]):
        key = self.make_key(contract, variable, arguments)
        return self.get(key)

    def set_var(self, contract, variable, arguments=[], value=None):
        key = self.make_key(contract, variable, arguments)
        self.set(key, value)

    def get_contract_keys(self, name):
        return self.keys(name + self.delimiter)

    def flush(self):
        self.driver.flush()
        self.clear_pending_state()
