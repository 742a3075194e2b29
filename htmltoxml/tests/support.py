import os
import codecs
import glob

base_path = os.path.split(__file__)[0]
test_dir = os.path.join(base_path, "testdata")
del base_path


def get_data_files(subdirectory, files="*.dat"):
    return sorted(glob.glob(os.path.join(test_dir, subdirectory, files)))


class DefaultDict(dict):
    def __init__(self, default, *args, **kwargs):
        self.default = default
        dict.__init__(self, *args, **kwargs)

    def __getitem__(self, key):
        return dict.get(self, key, self.default)


class TestData(object):
    """Reads a file of tests made of "#heading" sections.

    Each test starts with a newTestHeading section; a blank line separates
    consecutive tests and is not part of the preceding section.
    """

    def __init__(self, filename, newTestHeading="data", encoding="utf8"):
        with codecs.open(filename, encoding=encoding) as f:
            self.lines = f.readlines()
        self.newTestHeading = newTestHeading

    def __iter__(self):
        data = DefaultDict(None)
        key = None
        for line in self.lines:
            heading = self.isSectionHeading(line)
            if heading:
                if data and heading == self.newTestHeading:
                    # Remove trailing newline
                    data[key] = data[key][:-1]
                    yield self.normaliseOutput(data)
                    data = DefaultDict(None)
                key = heading
                data[key] = ""
            elif key is not None:
                data[key] += line
        if data:
            yield self.normaliseOutput(data)

    def isSectionHeading(self, line):
        """If the current heading is a test section heading return the heading,
        otherwise return False"""
        if line.startswith("#"):
            return line[1:].strip()
        else:
            return False

    def normaliseOutput(self, data):
        # Remove trailing newlines
        for key, value in data.items():
            if value.endswith("\n"):
                data[key] = value[:-1]
        return data


def errorMessage(input, expected, actual):
    msg = ("Input:\n%s\nExpected:\n%s\nReceived\n%s\n" %
           (repr(input), repr(expected), repr(actual)))
    return msg
