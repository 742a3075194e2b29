import pytest

from .support import TestData, errorMessage
from htmltoxml import HTMLToXMLConverter, constants


class ConversionFile(pytest.File):
    def collect(self):
        tests = TestData(str(self.path), "data")
        for i, test in enumerate(tests):
            yield ConversionTest.from_parent(self, name=str(i), test=test)


class ConversionTest(pytest.Item):
    def __init__(self, *, test, **kwargs):
        super(ConversionTest, self).__init__(**kwargs)
        self.test = test

    def runtest(self):
        converter = HTMLToXMLConverter()

        input = self.test['data']
        expected = self.test['output']
        expectedErrors = self.test['errors'].split("\n") if self.test['errors'] else []

        output = converter.convert(input)

        assert expected == output, errorMessage(input, expected, output)

        errStr = []
        for position, errorcode, datavars in converter.errors:
            assert isinstance(datavars, dict), "%s, %s" % (errorcode, repr(datavars))
            errStr.append("%i: %s" % (position, constants.E[errorcode] % datavars))
        actualErrors = [errorcode for _, errorcode, _ in converter.errors]

        errorMsg2 = "\n".join(["\n\nInput:", input,
                               "\nExpected errors (" + str(len(expectedErrors)) + "):\n" + "\n".join(expectedErrors),
                               "\nActual errors (" + str(len(actualErrors)) + "):\n" + "\n".join(errStr)])
        assert expectedErrors == actualErrors, errorMsg2

    def repr_failure(self, excinfo):
        traceback = excinfo.traceback
        ntraceback = traceback.cut(path=__file__)
        excinfo.traceback = ntraceback

        return excinfo.getrepr(funcargs=True,
                               showlocals=False,
                               style="short", tbfilter=False)

    def reportinfo(self):
        return self.path, None, "conversion test %s" % self.name
