__version__ = "0.2.0"


from ._errors import AlreadySetError as AlreadySetError
from ._errors import DuplicateFlagError as DuplicateFlagError
from ._errors import FlagError as FlagError
from ._errors import FlagParseError as FlagParseError
from ._errors import FlagValueError as FlagValueError
from ._errors import FlagValueParseError as FlagValueParseError
from ._errors import InvalidArgumentError as InvalidArgumentError
from ._errors import InvalidValueError as InvalidValueError
from ._errors import MissingRequiredFlagError as MissingRequiredFlagError
from ._errors import RegistrationAfterParseError as RegistrationAfterParseError
from ._errors import UnknownFlagError as UnknownFlagError
from ._errors import UnrecognizedFlagError as UnrecognizedFlagError
from ._errors import ValidatorRejectionError as ValidatorRejectionError
from ._flags import BooleanFlag as BooleanFlag
from ._flags import Flag as Flag
from ._flags import FlagKind as FlagKind
from ._flags import IntegerFlag as IntegerFlag
from ._flags import MultiStringFlag as MultiStringFlag
from ._flags import NumberFlag as NumberFlag
from ._flags import StringFlag as StringFlag
from ._flags import StringListFlag as StringListFlag
from ._registry import FLAGS as FLAGS
from ._registry import FlagRegistry as FlagRegistry
from ._registry import define_boolean as define_boolean
from ._registry import define_integer as define_integer
from ._registry import define_multi_string as define_multi_string
from ._registry import define_number as define_number
from ._registry import define_string as define_string
from ._registry import define_string_list as define_string_list
from ._registry import format_help as format_help
from ._registry import get as get
from ._registry import help as help
from ._registry import is_set as is_set
from ._registry import parse as parse
from ._registry import reset as reset
from ._registry import set_exit_on_error as set_exit_on_error
from ._registry import set_usage_info as set_usage_info
from ._settings import set_accent_color as set_accent_color
from ._settings import set_help_width as set_help_width
from ._singleton import MISSING as MISSING
from ._warnings import FlagsWarning as FlagsWarning
