class Dispatcher(dict):
    """Read-only dict with 2 special properties:

    On initiation, keys that are lists, sets or tuples are converted to
    multiple keys so accessing any one of the items in the original
    list-like object returns the matching value

    md = Dispatcher([(("foo", "bar"), "baz")])
    md["foo"] == "baz"

    A missing key returns the default value given on construction.
    """

    def __init__(self, items=(), default=None):
        _dictEntries = []
        for name, value in items:
            if isinstance(name, (list, tuple, frozenset, set)):
                for item in name:
                    _dictEntries.append((item, value))
            else:
                _dictEntries.append((name, value))
        dict.__init__(self, _dictEntries)
        assert len(self) == len(_dictEntries)
        self.default = default

    def __getitem__(self, key):
        return dict.get(self, key, self.default)

    def _readOnly(self, *args, **kwargs):
        raise TypeError("%s is read-only" % type(self).__name__)

    __setitem__ = __delitem__ = _readOnly
    clear = pop = popitem = setdefault = update = _readOnly
