"""
Environment checks: the GUI and data stack import and a Qt application starts.
"""


def test_pyqt5_imports():
    from PyQt5 import QtCore

    assert QtCore.QT_VERSION_STR


def test_data_stack_imports():
    import matplotlib
    import numpy
    import pandas

    assert matplotlib.__version__
    assert numpy.__version__
    assert pandas.__version__


def test_qt_application(qapp):
    from PyQt5 import QtWidgets

    assert QtWidgets.QApplication.instance() is qapp
