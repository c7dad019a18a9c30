import logging
import os
from importlib import reload
from unittest.mock import patch

from mvnargs import util


class util_:
    class enable_logging:
        def configures_debug_level_with_our_format(self):
            with patch("mvnargs.util.logging.basicConfig") as basicConfig:
                util.enable_logging()
            basicConfig.assert_called_once_with(
                level=logging.DEBUG, format=util.LOG_FORMAT
            )

    class env_var:
        def turns_logging_on_at_import(self, debug_env):
            with patch("logging.basicConfig") as basicConfig:
                reload(util)
            assert basicConfig.call_count == 1

        def leaves_logging_alone_when_unset(self):
            with patch.dict(os.environ):
                os.environ.pop("MVNARGS_DEBUG", None)
                with patch("logging.basicConfig") as basicConfig:
                    reload(util)
            assert not basicConfig.called

    def log_is_package_logger(self):
        assert util.log is logging.getLogger("mvnargs")
        assert util.debug == util.log.debug
