#!/usr/bin/env python
"""usage: %prog [options] filename

Convert an HTML document to well-formed XML, with optional profiling.
Reads from stdin when filename is "-" or missing.
"""

import sys
from optparse import OptionParser

from htmltoxml import HTMLToXMLConverter
from htmltoxml.constants import E


def convert():
    optParser = getOptParser()
    opts, args = optParser.parse_args()

    if args and args[-1] != "-":
        with open(args[-1], "rb") as f:
            source = f.read()
    else:
        source = sys.stdin.buffer.read()

    converter = HTMLToXMLConverter()

    def run():
        return converter.convert(source, encoding=opts.encoding)

    if opts.profile:
        import cProfile
        import pstats
        prof = cProfile.Profile()
        output = prof.runcall(run)
        stats = pstats.Stats(prof, stream=sys.stderr)
        stats.strip_dirs()
        stats.sort_stats('time')
        stats.print_stats()
        printOutput(converter, output, opts)
    elif opts.time:
        import time
        t0 = time.time()
        output = run()
        t1 = time.time()
        printOutput(converter, output, opts)
        t2 = time.time()
        sys.stderr.write("\n\nRun took: %fs (plus %fs to print the output)\n" % (t1 - t0, t2 - t1))
    else:
        output = run()
        printOutput(converter, output, opts)


def printOutput(converter, output, opts):
    sys.stdout.write(output)
    if opts.error:
        errList = []
        for position, errorcode, datavars in converter.errors:
            errList.append("Position %i: %s" % (position, E[errorcode] % datavars))
        sys.stderr.write("\nConversion errors:\n" + "\n".join(errList) + "\n")


def getOptParser():
    parser = OptionParser(usage=__doc__)

    parser.add_option("-p", "--profile", action="store_true", default=False,
                      dest="profile", help="Use cProfile to produce a detailed log of the run")

    parser.add_option("-t", "--time",
                      action="store_true", default=False, dest="time",
                      help="Time the run using time.time (may not be accurate on all platforms, especially for short runs)")

    parser.add_option("-e", "--error", action="store_true", default=False,
                      dest="error", help="Print a list of conversion errors")

    parser.add_option("", "--encoding", action="store", type="string",
                      dest="encoding", default=None,
                      help="Encoding label of the input (default utf-8)")

    return parser


if __name__ == "__main__":
    convert()
