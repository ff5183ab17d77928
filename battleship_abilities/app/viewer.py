import sys
from typing import List

from PyQt5 import QtCore, QtGui, QtWidgets

from battleship_abilities.abilities.registry import ability_def
from battleship_abilities.scenarios import default_scenario, run_scenario
from battleship_abilities.ui.board_view import BoardView
from battleship_abilities.ui.theme import Theme
from battleship_abilities.utils import debug


def apply_dark_palette(app: QtWidgets.QApplication):
    """Apply a consistent dark theme using the Theme color palette."""
    QtWidgets.QApplication.setStyle("Fusion")
    palette = QtGui.QPalette()

    palette.setColor(QtGui.QPalette.Window, QtGui.QColor(Theme.BG_DARK))
    palette.setColor(QtGui.QPalette.Base, QtGui.QColor(Theme.BG_DARK))
    palette.setColor(QtGui.QPalette.AlternateBase, QtGui.QColor(Theme.BG_PANEL))

    palette.setColor(QtGui.QPalette.WindowText, QtGui.QColor(Theme.TEXT_MAIN))
    palette.setColor(QtGui.QPalette.Text, QtGui.QColor(Theme.TEXT_MAIN))

    palette.setColor(QtGui.QPalette.Highlight, QtGui.QColor(Theme.HIGHLIGHT))
    palette.setColor(QtGui.QPalette.HighlightedText, QtCore.Qt.black)

    app.setPalette(palette)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, scenario=None):
        super().__init__()
        if scenario is None:
            scenario = default_scenario()
        self.scenario = scenario
        self.setWindowTitle(f"Battleship Abilities - {scenario.name}")

        try:
            board = run_scenario(scenario)
        except ValueError as e:
            debug.debug_event(self, "Scenario error", str(e), force_popup=True, level="error")
            raise

        central = QtWidgets.QWidget()
        root_layout = QtWidgets.QHBoxLayout(central)
        root_layout.setContentsMargins(12, 12, 12, 12)
        root_layout.setSpacing(16)

        self.board_view = BoardView(board)
        root_layout.addWidget(self.board_view, stretch=0)

        legend = QtWidgets.QVBoxLayout()
        legend.setSpacing(6)
        title = QtWidgets.QLabel("Abilities applied (in order):")
        title.setStyleSheet(f"color: {Theme.TEXT_LABEL};")
        legend.addWidget(title)

        self.ability_labels: List[QtWidgets.QLabel] = []
        for placement in scenario.abilities:
            info = ability_def(placement.ability)
            r, c = placement.origin
            lbl = QtWidgets.QLabel(f"{info['name']} at ({r},{c})")
            lbl.setToolTip(str(info["description"]))
            legend.addWidget(lbl)
            self.ability_labels.append(lbl)
        legend.addStretch(1)
        root_layout.addLayout(legend, stretch=1)

        self.setCentralWidget(central)


def main():
    argv = debug.configure_from(sys.argv)

    app = QtWidgets.QApplication(argv)
    apply_dark_palette(app)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
