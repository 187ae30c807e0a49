from unittest import TestCase
from custody.db.driver import ContractDriver
from custody.db.orm import Datum, Variable, Hash

driver = ContractDriver()


class TestDatum(TestCase):
    def setUp(self):
        driver.flush()

    def tearDown(self):
        driver.flush()

    def test_init(self):
        d = Datum('stustu', 'test', driver)
        self.assertEqual(d._key, driver.make_key('stustu', 'test'))


class TestVariable(TestCase):
    def setUp(self):
        driver.flush()

    def tearDown(self):
        driver.flush()

    def test_set(self):
        contract = 'stustu'
        name = 'holder'
        delimiter = driver.delimiter

        raw_key = '{}{}{}'.format(contract, delimiter, name)

        v = Variable(contract, name, driver=driver)
        v.set('colin')

        self.assertEqual(driver.get(raw_key), 'colin')

    def test_get(self):
        contract = 'stustu'
        name = 'holder'
        delimiter = driver.delimiter

        raw_key = '{}{}{}'.format(contract, delimiter, name)

        driver.set(raw_key, 'raghu')

        v = Variable(contract, name, driver=driver)

        self.assertEqual(v.get(), 'raghu')

    def test_set_none_clears(self):
        v = Variable('stustu', 'delegate', driver=driver)
        v.set('colin')
        driver.commit()

        v.set(None)
        driver.commit()

        self.assertIsNone(v.get())
        self.assertListEqual(driver.keys('stustu.'), [])


class TestHash(TestCase):
    def setUp(self):
        driver.flush()

    def tearDown(self):
        driver.flush()

    def test_set(self):
        h = Hash('stustu', 'metadata', driver=driver)

        h['uri'] = 'U0'

        driver.commit()

        self.assertEqual(driver.get('stustu.metadata:"uri"'), 'U0')

    def test_get_default_value(self):
        h = Hash('stustu', 'operators', driver=driver, default_value=False)

        self.assertIs(h['nobody'], False)

    def test_two_part_keys(self):
        h = Hash('stustu', 'operators', driver=driver)

        h['stu', 'colin'] = True

        self.assertEqual(driver.get('stustu.operators:"stu":"colin"'), True)
        self.assertTrue(h['stu', 'colin'])
        self.assertIsNone(h['colin', 'stu'])

    def test_separators_in_key_parts(self):
        h = Hash('stustu', 'operators', driver=driver)

        h['alice.eth', 'b:c'] = True
        h['alice', 'eth.b:c'] = 'other'

        self.assertIs(h['alice.eth', 'b:c'], True)
        self.assertEqual(h['alice', 'eth.b:c'], 'other')
        self.assertIsNone(h['alice.eth.b', 'c'])
        self.assertEqual(len(driver.keys('stustu.operators:')), 2)

    def test_key_parts_keep_their_type(self):
        h = Hash('stustu', 'operators', driver=driver)

        h['stu', None] = 'null'
        h['stu', 'None'] = 'string'
        h['stu', 1] = 'int'
        h['stu', '1'] = 'digit'

        self.assertEqual(h['stu', None], 'null')
        self.assertEqual(h['stu', 'None'], 'string')
        self.assertEqual(h['stu', 1], 'int')
        self.assertEqual(h['stu', '1'], 'digit')

    def test_empty_key_refused(self):
        h = Hash('stustu', 'operators', driver=driver)

        with self.assertRaises(AssertionError):
            h[()] = True
