from collections.abc import Mapping, MutableSet
from typing import Any, Dict, Iterable, List, Optional, Tuple

from typing_extensions import Self

from .options import OPTIONS, OPTIONS_BY_FIELD, OptionKind, render
from .ordered import OrderedSet
from .util import log


# Multi-valued fields which never render as flags.
POSITIONAL_FIELDS = ("goals", "phases")
#: Fields carried along (and compared) but never rendered at all.
EXTRA_FIELDS = ("properties",)

FIELDS: Tuple[str, ...] = (
    tuple(x.field for x in OPTIONS) + POSITIONAL_FIELDS + EXTRA_FIELDS
)

_EXTRA_KINDS = {
    "goals": OptionKind.SET,
    "phases": OptionKind.SET,
    "properties": OptionKind.MAPPING,
}

_FACTORIES = {
    OptionKind.MAPPING: dict,
    OptionKind.LIST: list,
    OptionKind.SET: OrderedSet,
}


def kind_of(field: str) -> OptionKind:
    """
    Return the `.OptionKind` of builder field ``field``.
    """
    if field in OPTIONS_BY_FIELD:
        return OPTIONS_BY_FIELD[field].kind
    return _EXTRA_KINDS[field]


def _coerce(field: str, value: Any) -> Any:
    # Stored collections are always of the field's own container type.
    if value is None:
        return None
    factory = _FACTORIES[kind_of(field)]
    if type(value) is factory:
        return value
    return factory(value)


class ArgsBuilder:
    """
    Accumulates Maven invocation options and renders them as CLI arguments.

    Every field has a plain setter (``set_<field>``), a getter (``is_<field>``
    for booleans, ``get_<field>`` otherwise) and a fluent mutator named after
    the field which returns the builder itself, so calls may be chained::

        ArgsBuilder().quiet().system_property("skipTests", "true").goals(
            "clean", "install"
        )

    Fluent mutators of list, set and mapping fields *accumulate* into the
    existing value rather than replacing it. Their getters lazily create an
    empty container when the field is unset and hand back the live object;
    changes made through it are seen by the builder.

    No method raises on ``None``, blank or empty input: such values simply
    mean "leave this flag out".

    Instances are not thread-safe. They are meant to be built up and rendered
    by a single owner; concurrent mutation needs external locking.

    Equality and hashing cover every field by value. The hash is only stable
    while the builder isn't mutated, so don't mutate one that's been used as
    a dict key.
    """

    def __init__(self) -> None:
        self._alternate_pom_file: Optional[str] = None
        self._system_properties: Optional[Dict[str, str]] = None
        self._offline = False
        self._quiet = False
        self._debug = False
        self._errors = False
        self._non_recursive = False
        self._update_snapshots = False
        self._activate_profiles: Optional[OrderedSet] = None
        self._batch_mode = False
        self._suppress_snapshot_updates = False
        self._checksum_failure_policy = False
        self._checksum_warning_policy = False
        self._alternate_user_settings: Optional[str] = None
        self._alternate_global_settings: Optional[str] = None
        self._alternate_user_toolchains: Optional[List[str]] = None
        self._alternate_global_toolchains: Optional[List[str]] = None
        self._fail_fast = False
        self._fail_at_end = False
        self._fail_never = False
        self._resume_from: Optional[str] = None
        self._project_list: Optional[List[str]] = None
        self._also_make = False
        self._also_make_dependents = False
        self._log_file: Optional[str] = None
        self._show_version = False
        self._encrypt_master_password: Optional[str] = None
        self._encrypt_password: Optional[str] = None
        self._threads: Optional[str] = None
        self._legacy_local_repository = False
        self._builder: Optional[str] = None
        self._no_transfer_progress = False
        self._goals: Optional[OrderedSet] = None
        self._phases: Optional[OrderedSet] = None
        self._properties: Optional[Dict[str, str]] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "ArgsBuilder":
        """
        Create a new builder populated from ``data``; see `update`.
        """
        return cls().update(data)

    def update(self, data: Optional[Mapping]) -> Self:
        """
        Apply a plain mapping of field names to values, e.g. a config section.

        Keys are field names; dashes are read as underscores, so both
        ``fail_fast`` and ``fail-fast`` work. Boolean and text values replace
        the current ones. List and set values (including ``goals`` and
        ``phases``) accumulate from any iterable, a lone string or other
        non-iterable counting as a single value. Mapping values are merged.
        Unknown keys, and non-mapping values for mapping fields, are ignored.
        """
        if not data:
            return self
        for key, value in data.items():
            field = str(key).replace("-", "_")
            if field not in FIELDS:
                log.debug("Ignoring unknown builder field {!r}".format(key))
                continue
            kind = kind_of(field)
            if kind in (OptionKind.BOOLEAN, OptionKind.TEXT):
                getattr(self, "set_" + field)(value)
            elif kind is OptionKind.MAPPING:
                if value is not None and not isinstance(value, Mapping):
                    msg = "Ignoring non-mapping value {!r} for {!r}"
                    log.debug(msg.format(value, key))
                    continue
                getattr(self, field)(value)
            elif value is not None:
                if isinstance(value, str) or not isinstance(value, Iterable):
                    value = [value]
                getattr(self, field)(*value)
        return self

    def copy(self) -> "ArgsBuilder":
        """
        Return a new builder equal to this one but sharing no containers.
        """
        new = self.__class__()
        for field in FIELDS:
            value = getattr(self, "_" + field)
            kind = kind_of(field)
            if value is not None and kind in _FACTORIES:
                value = _FACTORIES[kind](value)
            setattr(new, "_" + field, value)
        return new

    # Rendering

    def args(self) -> List[str]:
        """
        Render the current state as an ordered list of argument tokens.

        Flag groups come first, in option table order, followed by goals and
        then phases as bare tokens. Unset fields are left unset.
        """
        tokens = render(self)
        for positional in (self._goals, self._phases):
            if positional:
                tokens.extend(str(x) for x in positional if x is not None)
        log.debug("Rendered arguments: {!r}".format(tokens))
        return tokens

    def __str__(self) -> str:
        return " ".join(self.args())

    def __repr__(self) -> str:
        return "<{}: {!r}>".format(self.__class__.__name__, str(self))

    def _snapshot(self) -> Tuple[Any, ...]:
        # Unset containers equal empty ones; order always counts.
        values = []
        for field in FIELDS:
            value = getattr(self, "_" + field)
            kind = kind_of(field)
            if kind is OptionKind.BOOLEAN:
                value = bool(value)
            elif kind is OptionKind.MAPPING:
                value = tuple(value.items()) if value is not None else ()
            elif kind is not OptionKind.TEXT:
                value = tuple(value) if value is not None else ()
            values.append(value)
        return tuple(values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgsBuilder):
            return NotImplemented
        return self._snapshot() == other._snapshot()

    def __hash__(self) -> int:
        return hash(self._snapshot())

    def _lazy(self, field: str) -> Any:
        value = getattr(self, "_" + field)
        if value is None:
            value = _FACTORIES[kind_of(field)]()
            setattr(self, "_" + field, value)
        return value

    def _accumulate(self, field: str, values: Tuple[Any, ...]) -> Self:
        if values == (None,):
            return self
        container = self._lazy(field)
        if isinstance(container, MutableSet):
            container.update(values)
        else:
            container.extend(values)
        return self

    def _merge(self, field: str, mapping: Optional[Mapping]) -> Self:
        if mapping is not None:
            self._lazy(field).update(mapping)
        return self

    # Positional goals & phases

    def get_goals(self) -> OrderedSet:
        return self._lazy("goals")

    def set_goals(self, goals: Optional[Iterable[str]]) -> None:
        self._goals = _coerce("goals", goals)

    def goals(self, *goals: str) -> Self:
        return self._accumulate("goals", goals)

    def get_phases(self) -> OrderedSet:
        return self._lazy("phases")

    def set_phases(self, phases: Optional[Iterable[str]]) -> None:
        self._phases = _coerce("phases", phases)

    def phases(self, *phases: str) -> Self:
        return self._accumulate("phases", phases)

    # Freeform, non-rendered properties

    def get_properties(self) -> Dict[str, str]:
        return self._lazy("properties")

    def set_properties(self, properties: Optional[Dict[str, str]]) -> None:
        self._properties = _coerce("properties", properties)

    def properties(self, properties: Optional[Mapping]) -> Self:
        return self._merge("properties", properties)

    # -f

    def get_alternate_pom_file(self) -> Optional[str]:
        return self._alternate_pom_file

    def set_alternate_pom_file(self, path: Optional[str]) -> None:
        self._alternate_pom_file = path

    def alternate_pom_file(self, path: Optional[str]) -> Self:
        self.set_alternate_pom_file(path)
        return self

    # -D

    def get_system_properties(self) -> Dict[str, str]:
        return self._lazy("system_properties")

    def set_system_properties(
        self, system_properties: Optional[Dict[str, str]]
    ) -> None:
        self._system_properties = _coerce(
            "system_properties", system_properties
        )

    def system_properties(self, properties: Optional[Mapping]) -> Self:
        return self._merge("system_properties", properties)

    def system_property(
        self, name: Optional[str], value: Optional[str]
    ) -> Self:
        """
        Set system property ``name`` to ``value``.

        A ``value`` of ``None`` removes the property instead; a ``name`` of
        ``None`` does nothing.
        """
        if name is not None:
            if value is None:
                self.get_system_properties().pop(name, None)
            else:
                self.get_system_properties()[name] = value
        return self

    # -o

    def is_offline(self) -> bool:
        return self._offline

    def set_offline(self, offline: bool) -> None:
        self._offline = offline

    def offline(self, offline: bool = True) -> Self:
        self.set_offline(offline)
        return self

    # -q

    def is_quiet(self) -> bool:
        return self._quiet

    def set_quiet(self, quiet: bool) -> None:
        self._quiet = quiet

    def quiet(self, quiet: bool = True) -> Self:
        self.set_quiet(quiet)
        return self

    # -X

    def is_debug(self) -> bool:
        return self._debug

    def set_debug(self, debug: bool) -> None:
        self._debug = debug

    def debug(self, debug: bool = True) -> Self:
        self.set_debug(debug)
        return self

    # -e

    def is_errors(self) -> bool:
        return self._errors

    def set_errors(self, errors: bool) -> None:
        self._errors = errors

    def errors(self, errors: bool = True) -> Self:
        self.set_errors(errors)
        return self

    # -N

    def is_non_recursive(self) -> bool:
        return self._non_recursive

    def set_non_recursive(self, non_recursive: bool) -> None:
        self._non_recursive = non_recursive

    def non_recursive(self, non_recursive: bool = True) -> Self:
        self.set_non_recursive(non_recursive)
        return self

    # -U

    def is_update_snapshots(self) -> bool:
        return self._update_snapshots

    def set_update_snapshots(self, update_snapshots: bool) -> None:
        self._update_snapshots = update_snapshots

    def update_snapshots(self, update_snapshots: bool = True) -> Self:
        self.set_update_snapshots(update_snapshots)
        return self

    # -P

    def get_activate_profiles(self) -> OrderedSet:
        return self._lazy("activate_profiles")

    def set_activate_profiles(
        self, activate_profiles: Optional[Iterable[str]]
    ) -> None:
        self._activate_profiles = _coerce(
            "activate_profiles", activate_profiles
        )

    def activate_profiles(self, *profiles: str) -> Self:
        return self._accumulate("activate_profiles", profiles)

    # -B

    def is_batch_mode(self) -> bool:
        return self._batch_mode

    def set_batch_mode(self, batch_mode: bool) -> None:
        self._batch_mode = batch_mode

    def batch_mode(self, batch_mode: bool = True) -> Self:
        self.set_batch_mode(batch_mode)
        return self

    # -nsu

    def is_suppress_snapshot_updates(self) -> bool:
        return self._suppress_snapshot_updates

    def set_suppress_snapshot_updates(self, suppress: bool) -> None:
        self._suppress_snapshot_updates = suppress

    def suppress_snapshot_updates(self, suppress: bool = True) -> Self:
        self.set_suppress_snapshot_updates(suppress)
        return self

    # -C

    def is_checksum_failure_policy(self) -> bool:
        return self._checksum_failure_policy

    def set_checksum_failure_policy(self, strict: bool) -> None:
        self._checksum_failure_policy = strict

    def checksum_failure_policy(self, strict: bool = True) -> Self:
        self.set_checksum_failure_policy(strict)
        return self

    # -c

    def is_checksum_warning_policy(self) -> bool:
        return self._checksum_warning_policy

    def set_checksum_warning_policy(self, lax: bool) -> None:
        self._checksum_warning_policy = lax

    def checksum_warning_policy(self, lax: bool = True) -> Self:
        self.set_checksum_warning_policy(lax)
        return self

    # -s

    def get_alternate_user_settings(self) -> Optional[str]:
        return self._alternate_user_settings

    def set_alternate_user_settings(self, path: Optional[str]) -> None:
        self._alternate_user_settings = path

    def alternate_user_settings(self, path: Optional[str]) -> Self:
        self.set_alternate_user_settings(path)
        return self

    # -gs

    def get_alternate_global_settings(self) -> Optional[str]:
        return self._alternate_global_settings

    def set_alternate_global_settings(self, path: Optional[str]) -> None:
        self._alternate_global_settings = path

    def alternate_global_settings(self, path: Optional[str]) -> Self:
        self.set_alternate_global_settings(path)
        return self

    # -t

    def get_alternate_user_toolchains(self) -> List[str]:
        return self._lazy("alternate_user_toolchains")

    def set_alternate_user_toolchains(
        self, toolchains: Optional[List[str]]
    ) -> None:
        self._alternate_user_toolchains = _coerce(
            "alternate_user_toolchains", toolchains
        )

    def alternate_user_toolchains(self, *toolchains: str) -> Self:
        return self._accumulate("alternate_user_toolchains", toolchains)

    # -gt

    def get_alternate_global_toolchains(self) -> List[str]:
        return self._lazy("alternate_global_toolchains")

    def set_alternate_global_toolchains(
        self, toolchains: Optional[List[str]]
    ) -> None:
        self._alternate_global_toolchains = _coerce(
            "alternate_global_toolchains", toolchains
        )

    def alternate_global_toolchains(self, *toolchains: str) -> Self:
        return self._accumulate("alternate_global_toolchains", toolchains)

    # -ff

    def is_fail_fast(self) -> bool:
        return self._fail_fast

    def set_fail_fast(self, fail_fast: bool) -> None:
        self._fail_fast = fail_fast

    def fail_fast(self, fail_fast: bool = True) -> Self:
        self.set_fail_fast(fail_fast)
        return self

    # -fae

    def is_fail_at_end(self) -> bool:
        return self._fail_at_end

    def set_fail_at_end(self, fail_at_end: bool) -> None:
        self._fail_at_end = fail_at_end

    def fail_at_end(self, fail_at_end: bool = True) -> Self:
        self.set_fail_at_end(fail_at_end)
        return self

    # -fn

    def is_fail_never(self) -> bool:
        return self._fail_never

    def set_fail_never(self, fail_never: bool) -> None:
        self._fail_never = fail_never

    def fail_never(self, fail_never: bool = True) -> Self:
        self.set_fail_never(fail_never)
        return self

    # -rf

    def get_resume_from(self) -> Optional[str]:
        return self._resume_from

    def set_resume_from(self, project: Optional[str]) -> None:
        self._resume_from = project

    def resume_from(self, project: Optional[str]) -> Self:
        self.set_resume_from(project)
        return self

    # -pl

    def get_project_list(self) -> List[str]:
        return self._lazy("project_list")

    def set_project_list(self, projects: Optional[List[str]]) -> None:
        self._project_list = _coerce("project_list", projects)

    def project_list(self, *projects: str) -> Self:
        return self._accumulate("project_list", projects)

    # -am

    def is_also_make(self) -> bool:
        return self._also_make

    def set_also_make(self, also_make: bool) -> None:
        self._also_make = also_make

    def also_make(self, also_make: bool = True) -> Self:
        self.set_also_make(also_make)
        return self

    # -amd

    def is_also_make_dependents(self) -> bool:
        return self._also_make_dependents

    def set_also_make_dependents(self, also_make_dependents: bool) -> None:
        self._also_make_dependents = also_make_dependents

    def also_make_dependents(self, also_make_dependents: bool = True) -> Self:
        self.set_also_make_dependents(also_make_dependents)
        return self

    # -l

    def get_log_file(self) -> Optional[str]:
        return self._log_file

    def set_log_file(self, log_file: Optional[str]) -> None:
        self._log_file = log_file

    def log_file(self, log_file: Optional[str]) -> Self:
        self.set_log_file(log_file)
        return self

    # -V

    def is_show_version(self) -> bool:
        return self._show_version

    def set_show_version(self, show_version: bool) -> None:
        self._show_version = show_version

    def show_version(self, show_version: bool = True) -> Self:
        self.set_show_version(show_version)
        return self

    # -emp

    def get_encrypt_master_password(self) -> Optional[str]:
        return self._encrypt_master_password

    def set_encrypt_master_password(self, password: Optional[str]) -> None:
        self._encrypt_master_password = password

    def encrypt_master_password(self, password: Optional[str]) -> Self:
        self.set_encrypt_master_password(password)
        return self

    # -ep

    def get_encrypt_password(self) -> Optional[str]:
        return self._encrypt_password

    def set_encrypt_password(self, password: Optional[str]) -> None:
        self._encrypt_password = password

    def encrypt_password(self, password: Optional[str]) -> Self:
        self.set_encrypt_password(password)
        return self

    # -T

    def get_threads(self) -> Optional[str]:
        return self._threads

    def set_threads(self, threads: Optional[str]) -> None:
        self._threads = threads

    def threads(self, threads: Optional[str]) -> Self:
        self.set_threads(threads)
        return self

    # -llr

    def is_legacy_local_repository(self) -> bool:
        return self._legacy_local_repository

    def set_legacy_local_repository(self, legacy: bool) -> None:
        self._legacy_local_repository = legacy

    def legacy_local_repository(self, legacy: bool = True) -> Self:
        self.set_legacy_local_repository(legacy)
        return self

    # -b

    def get_builder(self) -> Optional[str]:
        return self._builder

    def set_builder(self, builder_id: Optional[str]) -> None:
        self._builder = builder_id

    def builder(self, builder_id: Optional[str]) -> Self:
        self.set_builder(builder_id)
        return self

    # -ntp

    def is_no_transfer_progress(self) -> bool:
        return self._no_transfer_progress

    def set_no_transfer_progress(self, no_transfer_progress: bool) -> None:
        self._no_transfer_progress = no_transfer_progress

    def no_transfer_progress(self, no_transfer_progress: bool = True) -> Self:
        self.set_no_transfer_progress(no_transfer_progress)
        return self
