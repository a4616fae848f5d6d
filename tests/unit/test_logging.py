"""Tests for logging helpers."""
import logging

import pytest

import gofilepy
from gofilepy.core.logging import get_logger


class TestGetLogger:
    """Test suite for get_logger."""
    
    def test_returns_named_logger(self):
        logger = get_logger('gofilepy.test')
        
        assert logger is logging.getLogger('gofilepy.test')
        assert logger.propagate is True
    
    def test_default_level_without_root_handlers(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, 'handlers', [])
        logging.getLogger('gofilepy.quiet').setLevel(logging.NOTSET)
        
        logger = get_logger('gofilepy.quiet')
        
        assert logger.level == logging.WARNING


class TestSetupLogging:
    """Test suite for setup_logging."""
    
    @pytest.fixture(autouse=True)
    def restore_levels(self):
        names = ['gofilepy', 'gofilepy.upload', 'gofilepy.download']
        levels = {name: logging.getLogger(name).level for name in names}
        yield
        for name, level in levels.items():
            logging.getLogger(name).setLevel(level)
    
    def test_sets_levels(self):
        gofilepy.setup_logging(logging.DEBUG)
        
        assert logging.getLogger('gofilepy').level == logging.DEBUG
        assert logging.getLogger('gofilepy.upload').level == logging.DEBUG
        assert logging.getLogger('gofilepy.download').level == logging.DEBUG
