# -*- coding: utf-8 -*-

import logging
import sys

import pytest

from ibe.common import log


@pytest.fixture
def log_dir(monkeypatch, tmpdir):
    monkeypatch.setattr(log.ibe_path, 'get_log_dir', lambda: str(tmpdir))
    return tmpdir


@pytest.fixture
def restore_levels(request):
    root_level = logging.getLogger().level
    ibe_level = logging.getLogger('ibe').level

    def _restore():
        logging.getLogger().setLevel(root_level)
        logging.getLogger('ibe').setLevel(ibe_level)
    request.addfinalizer(_restore)


class TestLogContext(object):

    def test_context_writes_log_file(self, log_dir, restore_levels):
        root_logger = logging.getLogger()
        nb_handlers = len(root_logger.handlers)

        with log.Context('test.log'):
            assert len(root_logger.handlers) == nb_handlers + 2
            assert sys.excepthook is log._excepthook
            logging.getLogger('ibe.test').info('Hello log file')

        assert len(root_logger.handlers) == nb_handlers
        assert sys.excepthook is not log._excepthook
        assert 'Hello log file' in log_dir.join('test.log').read()

    def test_context_without_file(self, log_dir, restore_levels):
        root_logger = logging.getLogger()
        nb_handlers = len(root_logger.handlers)

        with log.Context(None):
            assert len(root_logger.handlers) == nb_handlers + 1
        assert not log_dir.listdir()

    def test_hidebug_level_name(self, log_dir, restore_levels):
        with log.Context(None):
            assert logging.getLevelName(log.HIDEBUG) == 'HIDEBUG'


class TestLogLevels(object):

    def test_set_debug_mode(self, restore_levels):
        log.set_debug_mode(True)
        assert logging.getLogger('ibe').level == logging.DEBUG
        assert logging.getLogger().level == logging.INFO

        log.set_debug_mode(False)
        assert logging.getLogger('ibe').level == logging.INFO
        assert logging.getLogger().level == logging.WARNING

    def test_set_logs_level(self):
        log.set_logs_level({'ibe.test.a': 'debug', 'ibe.test.b': 40,
                            'ibe.test.c': '30'})
        assert logging.getLogger('ibe.test.a').level == logging.DEBUG
        assert logging.getLogger('ibe.test.b').level == logging.ERROR
        assert logging.getLogger('ibe.test.c').level == logging.WARNING

    def test_set_invalid_logs_level(self, caplog):
        log.set_logs_level({'ibe.test.d': 'plop'})
        assert logging.getLogger('ibe.test.d').level == logging.NOTSET
        assert 'Invalid log level' in caplog.text


class TestColoredFormatter(object):

    def test_format_colorize_name(self):
        formatter = log.ColoredFormatter(fmt='%(name)s %(message)s')
        record = logging.LogRecord('ibe.test', logging.INFO, __file__, 1,
                                   'message', None, None)
        output = formatter.format(record)

        assert 'message' in output
        assert '\033[36mibe.test' in output
        assert record.name == 'ibe.test'


class TestReset(object):

    def test_reset_removes_root_handlers(self):
        root_logger = logging.getLogger()
        saved = root_logger.handlers[:]
        try:
            root_logger.addHandler(logging.NullHandler())
            root_logger.addFilter(logging.Filter('ibe'))
            log.reset()
            assert root_logger.handlers == []
            assert root_logger.filters == []
        finally:
            for handler in saved:
                root_logger.addHandler(handler)
