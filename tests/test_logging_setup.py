"""Tests for logging_setup module."""

import logging

from logging_setup import configure_from, setup_logging, get_logger


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_default_level_is_info(self):
        """Default verbosity sets INFO level on console."""
        logger = setup_logging(verbosity=0)
        console_handler = logger.handlers[0]
        assert console_handler.level == logging.INFO

    def test_verbose_enables_debug(self):
        """Detailed logging sets DEBUG level."""
        logger = setup_logging(verbosity=1)
        console_handler = logger.handlers[0]
        assert console_handler.level == logging.DEBUG

    def test_quiet_sets_warning(self):
        """Quiet mode sets WARNING level."""
        logger = setup_logging(verbosity=-1)
        console_handler = logger.handlers[0]
        assert console_handler.level == logging.WARNING

    def test_repeated_setup_does_not_stack_handlers(self):
        """Calling setup twice leaves a single console handler."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_file_handler_is_debug_level(self, tmp_path):
        """File handler always captures DEBUG."""
        log_file = tmp_path / "test.log"
        logger = setup_logging(verbosity=-1, log_file=log_file)

        file_handlers = [
            h for h in logger.handlers if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        file_handlers[0].close()


class TestGetLogger:
    """Tests for get_logger()."""

    def test_returns_provider_logger(self):
        """Returns the headshot_provider logger."""
        logger = get_logger()
        assert logger.name == "headshot_provider"

    def test_child_logger(self):
        """A suffix yields a child of the provider logger."""
        logger = get_logger("cache")
        assert logger.name == "headshot_provider.cache"
        assert logger.parent is get_logger()


class TestConfigureFrom:
    """Tests for configure_from()."""

    def test_detailed_logging_enables_debug(self, sample_config):
        """enable_detailed_logging turns DEBUG on for the provider loggers."""
        sample_config.enable_detailed_logging = True

        configure_from(sample_config)

        assert get_logger("cache").isEnabledFor(logging.DEBUG)

    def test_default_leaves_level_alone(self, sample_config):
        """Without the flag the host's level is untouched."""
        get_logger().setLevel(logging.INFO)

        configure_from(sample_config)

        assert get_logger().level == logging.INFO
