"""Tools to define local options.

Modules that have a tunable setting (the default variable symbol, verbose
output) declare an Option for it right next to the code that reads it.  The
`setup` procedure then informs a command-line parser about every Option that
has been declared so far, and `read` copies the parsed values back.

Important things defined here:
 - Option: a named, typed setting with a default value
 - setup / read: wire all Options into an argparse parser
 - snapshot / restore: save and restore all option values (handy in tests)
"""

# All Option objects that have ever been created.
_OPTS = []

# Default values for options.  The `restore` procedure needs this to override
# values for options in modules that have not been imported yet.
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None, check=None):
        assert type in (bool, str, int)
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.metavar = metavar
        self.check = check
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        _OPTS.append(self)

    def set(self, value):
        """Change the value of this option, validating it first."""
        if self.type is int:
            value = int(value)
        if self.check is not None and not self.check(value):
            raise ValueError("illegal value {!r} for option --{}".format(value, self.name))
        self.value = value

    def __bool__(self):
        raise Exception(
            "An attempt was made to convert an Option to a boolean. " +
            "If you intended to read the value of this Option, use `_.value`. " +
            "If you intended to check whether this object is None, use `_ is None`.")

def _argname(o):
    if o.type is bool:
        return ("no-" + o.name) if o.default else o.name
    return o.name

def setup(parser):
    for o in _OPTS:
        n = _argname(o)
        if o.type is bool:
            parser.add_argument("--" + n, action="store_true", default=False, help=o.description)
        elif o.type in (str, int):
            parser.add_argument("--" + n, metavar=o.metavar, default=o.value, help=(o.description + " (default={})".format(repr(o.default))) if o.description else "default={}".format(repr(o.default)))

def read(args):
    for o in _OPTS:
        value = getattr(args, _argname(o).replace("-", "_"))
        if o.type is bool and o.default:
            value = not value
        o.set(value)

def snapshot():
    """Produce a snapshot of current option values."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES

    # Set the values for options that have already been imported.
    for o in _OPTS:
        o.value = snap.get(o.name, o.value)

    # Set the overrides for options that have not yet been imported.
    _DEFAULT_VALUE_OVERRIDES = dict(snap)
