import sys

class Reporter():
    """
    report errors
    """
    def __init__(self, stream = None):
        self.errors  = []
        self.section = None
        self.stream  = stream or sys.stderr

    def crash(self, errstr):
        if self.errors:
            print("=== Error backlog ===", file=self.stream)

        for err in self.errors:
            print(f"[ Error ] {err}", file=self.stream)

        errstr = f"{{{self.section}}} \t| " + str(errstr) if self.section else str(errstr)
        print(f"[ Fatal Error ] | {errstr}", file=self.stream)

        sys.exit(1)

    def log(self, error):
        match error:
            case Errors():
                for err in error.errors:
                    self.log(err)
            case _:
                if self.section:
                    self.errors.append(f"{{{self.section}}} \t| " + str(error))
                else:
                    self.errors.append(str(error))

    def checkpoint(self, section = None):
        self.section = section

        if self.errors:
            self.crash("error backlog at checkpoint")

class Error():
    """
    class allows to pass errors forward with all information
    """
    def __init__(self, errstr, this = None, context = None):
        self.errstr     = errstr
        self.this       = this
        self.context    = context

    def __repr__(self):
        to_log  = self.errstr
        to_log += f" in {{{self.this}}}"              if self.this     else ""
        to_log += f" in context {{{self.context}}}"   if self.context  else ""
        return to_log

class DivisionByZero(Error):
    def __init__(self, this = None, context = None):
        super().__init__("division by zero", this, context)

class Errors():
    def __init__(self, errors = None):
        self.errors = errors or []

    def __bool__(self):
        return len(self.errors) != 0

    def __len__(self):
        return len(self.errors)

    def __repr__(self):
        return "; ".join(str(err) for err in self.errors)

    def add(self, error : Error):
        self.errors.append(error)
        return self
