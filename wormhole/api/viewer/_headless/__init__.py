"""Headless viewer backend for scripted and command line use."""

from .HeadlessViewer import HeadlessViewer

__all__ = ["HeadlessViewer"]
