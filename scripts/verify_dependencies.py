#!/usr/bin/env python3
"""
Installation check for AndProguard.

Verifies that PyQt6 works headless, that the shipped default rules compile,
and that the rule settings form can be built.
"""

import os
import sys


# ANSI color codes for terminal output
class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    BLUE = '\033[94m'
    RESET = '\033[0m'
    BOLD = '\033[1m'


def print_success(message):
    print(f"{Colors.GREEN}✓ {message}{Colors.RESET}")


def print_error(message):
    print(f"{Colors.RED}✗ {message}{Colors.RESET}")


def print_info(message):
    print(f"{Colors.BLUE}ℹ {message}{Colors.RESET}")


def print_header(message):
    print(f"\n{Colors.BOLD}{message}{Colors.RESET}")


def verify_pyqt6():
    """Verify PyQt6 installation and create a QApplication offscreen."""
    try:
        if "QT_QPA_PLATFORM" not in os.environ:
            os.environ["QT_QPA_PLATFORM"] = "offscreen"

        from PyQt6.QtWidgets import QApplication
        from PyQt6 import QtCore

        print_success(f"PyQt6 {QtCore.PYQT_VERSION_STR} installed successfully")

        if QApplication.instance() is None:
            QApplication([])
        print_info("  QApplication created successfully")
        return True
    except ImportError as e:
        print_error(f"PyQt6 import failed: {e}")
        return False
    except Exception as e:
        print_error(f"PyQt6 functionality test failed: {e}")
        return False


def verify_default_rules():
    """Compile the shipped rules and generate one name from each."""
    try:
        from andproguard.core import NameGenerator, RuleSettings

        generator = NameGenerator(RuleSettings.defaults())
        print_success("Default rules compiled")
        print_info(f"  sample class name: {generator.random_class_name()}")
        print_info(f"  sample method name: {generator.random_method_name()}")
        print_info(f"  sample layout name: {generator.random_layout_res_name()}")
        return True
    except ImportError as e:
        print_error(f"andproguard import failed: {e}")
        return False
    except ValueError as e:
        print_error(f"Default rules failed to compile: {e}")
        return False


def verify_form():
    """Build the rule settings form from the defaults."""
    try:
        from andproguard.core import RuleSettings
        from andproguard.gui.widgets import RuleSettingsForm

        form = RuleSettingsForm.from_settings(RuleSettings.defaults())
        if form.get_settings() != RuleSettings.defaults():
            print_error("Rule settings form does not round-trip the defaults")
            return False
        print_success("Rule settings form built")
        return True
    except Exception as e:
        print_error(f"Rule settings form failed: {e}")
        return False


def main():
    print_header("=" * 60)
    print_header("AndProguard - Installation Check")
    print_header("=" * 60)

    print_info(f"Python version: {sys.version}")

    results = [
        ("PyQt6", verify_pyqt6()),
        ("default rules", verify_default_rules()),
        ("settings form", verify_form()),
    ]

    print_header("Verification Summary:")
    print_header("-" * 60)
    for name, passed in results:
        status = f"{Colors.GREEN}PASS{Colors.RESET}" if passed else f"{Colors.RED}FAIL{Colors.RESET}"
        print(f"  {name:20s} [{status}]")
    print_header("-" * 60)

    if all(passed for _, passed in results):
        print_success("All checks passed")
        return 0

    print_error("Some checks failed.")
    print_info("To install the package with its dependencies, run:")
    print_info("  pip install -e .")
    return 1


if __name__ == "__main__":
    sys.exit(main())
