import sys

from .reporter import Error, Errors

class Tools:
    def __init__(self, reporter):
        self.reporter = reporter

    def parseargs(self, argv = None):
        """
        return the input file name, None for standard input
        """
        argv    = sys.argv if argv is None else argv
        errors  = Errors()

        if len(argv) > 2:
            errors.add(Error(f"didnt expect so many args: {argv[1:]}",
                             context = f"usage: {argv[0]} [<filename>]"))

        if errors:
            self.reporter.log(errors)

        if len(argv) < 2 or argv[1] == "-":
            return None

        return argv[1]

    def open_input(self, filename, stdin = None):
        """
        return a readable text stream for the input
        """
        if filename is None:
            return stdin or sys.stdin

        try:
            return open(filename, "r")
        except OSError as e:
            self.reporter.crash(f"cannot read input file {filename}: {e}")
