"""Domain enumerations."""

from enum import Enum, auto


class Role(Enum):
    """Declared role of an identifier in source code.

    Every identifier carries exactly one role. The role decides
    which naming rules apply.
    """

    FOLDER = "folder"
    FILE = "file"
    CLASS = "class"
    FUNCTION = "function"
    METHOD = "method"
    PARAMETER = "parameter"
    LOCAL_VARIABLE = "local variable"
    PROPERTY = "property"
    ENUM = "enum"
    GLOBAL_CONSTANT = "global constant"


class CasingPattern(Enum):
    """Shape of an identifier. Pattern classes are disjoint."""

    CAMEL_CASE = "camelCase"
    CAPITAL_CAMEL_CASE = "CapitalCamelCase"
    ALL_CAPS_UNDERSCORE = "ALL_CAPS_UNDERSCORE"
    SNAKE_CASE = "snake_case"
    OTHER = "other"


class Visibility(Enum):
    """Visibility by naming convention.

    Naming flag only: nothing enforces access.
    """

    PUBLIC = auto()  # name
    PROTECTED = auto()  # _name


class Severity(Enum):
    """Rule violation severity."""

    ERROR = auto()  # scan fails
    WARNING = auto()  # scan passes, warning shown
    INFO = auto()  # informational


class RuleCategory(Enum):
    """Convention rule category."""

    INPUT = auto()  # malformed input (empty identifier)
    NAMING = auto()  # identifier casing and affixes
    FORMATTING = auto()  # line length, whitespace
    METHOD_CONTRACT = auto()  # method-type contract breaches
    CLASSIFICATION = auto()  # unclassified methods

    # User extension
    CUSTOM = auto()


class MethodType(Enum):
    """Method-type taxonomy of the style guide."""

    CONSTRUCTOR = "constructor"
    DESIGNATED_INIT = "designated init"
    CONVENIENCE_INIT = "convenience init"
    GIVE = "give"
    VALIDATE = "validate"
    DO = "do"
    ON = "on"

    @property
    def is_init(self) -> bool:
        """True for designated and convenience initializers."""
        return self in (MethodType.DESIGNATED_INIT, MethodType.CONVENIENCE_INIT)


class ReturnContract(Enum):
    """Whether a method type must, must not, or may return a value."""

    REQUIRED = auto()
    FORBIDDEN = auto()
    ANY = auto()


class CallScope(Enum):
    """Receiver of a call made from a method body."""

    SUPER = auto()  # parent class
    SELF = auto()  # same class
    EXTERNAL = auto()  # anything else


class AcronymPolicy(Enum):
    """How all-caps words inside camel identifiers are treated.

    PERMISSIVE: any all-caps word is accepted (userID).
    KNOWN: all-caps words are accepted only when configured as acronyms.
    STRICT: all-caps words of two or more letters are rejected (use userId).
    """

    PERMISSIVE = "permissive"
    KNOWN = "known"
    STRICT = "strict"
