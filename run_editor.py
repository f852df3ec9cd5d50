#!/usr/bin/env python
"""
PSF Font Editor - Standalone entry point for PyInstaller.
"""
import sys

from psf_editor.main import main

if __name__ == "__main__":
    sys.exit(main())
