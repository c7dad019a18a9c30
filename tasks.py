from typing import TYPE_CHECKING, Optional

from invocations import checks
from invocations.packaging import release
from invocations.pytest import coverage as coverage_
from invocations.pytest import test as test_

from invoke import Collection, task

if TYPE_CHECKING:
    from invoke import Context


@task
def test(
    c: "Context",
    verbose: bool = False,
    color: bool = True,
    capture: str = "sys",
    module: Optional[str] = None,
    k: Optional[str] = None,
    x: bool = False,
    opts: str = "",
    pty: bool = True,
) -> None:
    """
    Run pytest. See `invocations.pytest.test` for details.
    """
    test_(
        c,
        verbose=verbose,
        color=color,
        capture=capture,
        module=module,
        k=k,
        x=x,
        opts=opts,
        pty=pty,
    )


@task
def coverage(
    c: "Context", report: str = "term", opts: str = "", codecov: bool = False
) -> None:
    """
    Run pytest in coverage mode. See `invocations.pytest.coverage` for details.
    """
    coverage_(c, report=report, opts=opts, tester=test, codecov=codecov)


ns = Collection(test, coverage, release, checks.blacken, checks)
ns.configure({"packaging": {"wheel": True, "check_desc": True}})
