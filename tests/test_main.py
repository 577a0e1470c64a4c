"""
Tests for main.py - command line options.
"""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import console
import main
from config import GRID_WIDTH, GRID_HEIGHT, FPS, MAX_FPS, MIN_FPS


class TestParseArgs:
    """Tests for parse_args."""

    def test_defaults(self):
        args = main.parse_args([])
        assert args.width == GRID_WIDTH
        assert args.height == GRID_HEIGHT
        assert args.fps == FPS
        assert args.seed is None
        assert args.console is False

    def test_overrides(self):
        args = main.parse_args(['--width', '30', '--height', '15', '--fps', '12',
                                '--seed', '42', '--console'])
        assert (args.width, args.height, args.fps) == (30, 15, 12)
        assert args.seed == 42
        assert args.console is True

    def test_fps_is_clamped(self):
        assert main.parse_args(['--fps', '500']).fps == MAX_FPS
        assert main.parse_args(['--fps', '1']).fps == MIN_FPS

    @pytest.mark.parametrize("argv", [
        ['--width', '0'],
        ['--height', '-3'],
        ['--width', 'abc'],
        ['--width', '2'],
        ['--width', '3', '--height', '1'],
    ])
    def test_invalid_values(self, argv):
        with pytest.raises(SystemExit):
            main.parse_args(argv)


class TestMain:
    """Tests for main dispatch."""

    def test_console_mode(self, monkeypatch):
        calls = []
        monkeypatch.setattr(console, 'play', lambda *args: calls.append(args))
        main.main(['--console', '--width', '12', '--height', '8', '--fps', '4', '--seed', '3'])
        assert calls == [(12, 8, 4, 3)]
