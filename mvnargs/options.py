"""
The option table: which builder field maps to which Maven flag, and how.

Each `Option` couples a short flag name with an `OptionKind` and the name of
the `.ArgsBuilder` field it reads. The kind decides both whether the option is
emitted at all and what its tokens look like; it is declared per option since
the container type of a value alone can't tell a repeatable flag (``-P a -P
b``) from a comma-delimited one (``-pl a,b``).
"""

import enum
import re
from operator import attrgetter
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

if TYPE_CHECKING:
    from .builder import ArgsBuilder


WHITESPACE = re.compile(r"\s")


class OptionKind(enum.Enum):
    BOOLEAN = "boolean"
    TEXT = "text"
    MAPPING = "mapping"
    LIST = "list"
    SET = "set"


class Option:
    """
    A single renderable builder field.

    :param str name:
        Short flag identifier, without the leading dash (e.g. ``"o"`` or
        ``"nsu"``).
    :param kind:
        An `OptionKind` member.
    :param str field:
        Name of the `.ArgsBuilder` field. The stored value (``_<field>``) is
        read directly, skipping the lazy getters, so rendering never
        materializes empty containers.
    """

    def __init__(self, name: str, kind: OptionKind, field: str) -> None:
        self.name = name
        self.kind = kind
        self.field = field
        self.getter = attrgetter("_" + field)

    def __repr__(self) -> str:
        return "<{}: -{} ({}) [{}]>".format(
            self.__class__.__name__, self.name, self.field, self.kind.value
        )

    @property
    def flag(self) -> str:
        return "-" + self.name

    def is_present(self, value: Any) -> bool:
        """
        Whether ``value`` warrants emitting this option at all.

        ``None``, ``False``, blank strings and empty containers all mean
        "absent".
        """
        if value is None:
            return False
        if self.kind is OptionKind.BOOLEAN:
            return bool(value)
        if self.kind is OptionKind.TEXT:
            return bool(str(value).strip())
        return len(value) > 0

    def render_value(self, value: Any) -> List[str]:
        """
        Turn an already-present ``value`` into this option's tokens.
        """
        if self.kind is OptionKind.BOOLEAN:
            return [self.flag]
        if self.kind is OptionKind.TEXT:
            return [self.flag, str(value)]
        if self.kind is OptionKind.MAPPING:
            pairs = ",".join(
                "{}={}".format(key, _quote(val))
                for key, val in value.items()
                if val is not None
            )
            return [self.flag, pairs] if pairs else []
        values = [str(x) for x in value if x is not None]
        if not values:
            return []
        if self.kind is OptionKind.LIST:
            return [self.flag, ",".join(values)]
        # SET: one flag occurrence per value
        tokens = []
        for x in values:
            tokens.extend((self.flag, x))
        return tokens

    def render(self, builder: "ArgsBuilder") -> List[str]:
        value = self.getter(builder)
        if not self.is_present(value):
            return []
        return self.render_value(value)


def _quote(value: Any) -> str:
    # Only the value gets quoted, and only when it holds whitespace.
    value = str(value)
    if WHITESPACE.search(value):
        return '"{}"'.format(value)
    return value


OPTIONS: Tuple[Option, ...] = (
    Option("f", OptionKind.TEXT, "alternate_pom_file"),
    Option("D", OptionKind.MAPPING, "system_properties"),
    Option("o", OptionKind.BOOLEAN, "offline"),
    Option("q", OptionKind.BOOLEAN, "quiet"),
    Option("X", OptionKind.BOOLEAN, "debug"),
    Option("e", OptionKind.BOOLEAN, "errors"),
    Option("N", OptionKind.BOOLEAN, "non_recursive"),
    Option("U", OptionKind.BOOLEAN, "update_snapshots"),
    Option("P", OptionKind.SET, "activate_profiles"),
    Option("B", OptionKind.BOOLEAN, "batch_mode"),
    Option("nsu", OptionKind.BOOLEAN, "suppress_snapshot_updates"),
    Option("C", OptionKind.BOOLEAN, "checksum_failure_policy"),
    Option("c", OptionKind.BOOLEAN, "checksum_warning_policy"),
    Option("s", OptionKind.TEXT, "alternate_user_settings"),
    Option("gs", OptionKind.TEXT, "alternate_global_settings"),
    Option("t", OptionKind.LIST, "alternate_user_toolchains"),
    Option("gt", OptionKind.LIST, "alternate_global_toolchains"),
    Option("ff", OptionKind.BOOLEAN, "fail_fast"),
    Option("fae", OptionKind.BOOLEAN, "fail_at_end"),
    Option("fn", OptionKind.BOOLEAN, "fail_never"),
    Option("rf", OptionKind.TEXT, "resume_from"),
    Option("pl", OptionKind.LIST, "project_list"),
    Option("am", OptionKind.BOOLEAN, "also_make"),
    Option("amd", OptionKind.BOOLEAN, "also_make_dependents"),
    Option("l", OptionKind.TEXT, "log_file"),
    Option("V", OptionKind.BOOLEAN, "show_version"),
    Option("emp", OptionKind.TEXT, "encrypt_master_password"),
    Option("ep", OptionKind.TEXT, "encrypt_password"),
    Option("T", OptionKind.TEXT, "threads"),
    Option("llr", OptionKind.BOOLEAN, "legacy_local_repository"),
    Option("b", OptionKind.TEXT, "builder"),
    Option("ntp", OptionKind.BOOLEAN, "no_transfer_progress"),
)

OPTIONS_BY_FIELD: Dict[str, Option] = {x.field: x for x in OPTIONS}


def render(
    builder: "ArgsBuilder", options: Optional[Iterable[Option]] = None
) -> List[str]:
    """
    Render ``builder``'s flag groups, in ``options`` order.

    Positional goals and phases are not included; see `.ArgsBuilder.args`.

    :param options:
        Option table to walk. Defaults to `OPTIONS`.
    """
    tokens: List[str] = []
    for option in OPTIONS if options is None else options:
        tokens.extend(option.render(builder))
    return tokens
