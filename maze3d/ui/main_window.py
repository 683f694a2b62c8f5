"""Main window for the 3D maze solver."""

from typing import Dict

from PySide6.QtWidgets import (
    QMainWindow, QVBoxLayout, QHBoxLayout, QWidget, QPushButton, QLabel,
    QCheckBox, QSpinBox, QStatusBar, QGroupBox, QGridLayout, QTextEdit,
)
from PySide6.QtGui import QKeySequence, QShortcut

from ..domain.types import AXES, MIN_DIMENSION, MIN_MAX_DIMENSION, MAX_MAX_DIMENSION
from ..app.controller import MazeController, MazeSnapshot
from ..app.fsm import MazeState
from .layer_view import LayerView


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: MazeController):
        super().__init__()
        self.controller = controller

        self.setWindowTitle("3D Maze Solver")
        self.setMinimumSize(1100, 650)

        self._create_ui()
        self._setup_connections()
        self._setup_shortcuts()

        self._sync_controls(self.controller.snapshot())

    def _create_ui(self):
        """Create the user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QHBoxLayout(central_widget)
        main_layout.addWidget(self._create_controls(), 0)

        self.layer_view = LayerView(self.controller)
        main_layout.addWidget(self.layer_view, 1)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready - G to generate, S to solve, F to fit, Q to quit")

    def _create_controls(self) -> QWidget:
        """Create the control panel."""
        panel = QWidget()
        panel.setMaximumWidth(280)
        layout = QVBoxLayout(panel)

        # Dimensions
        dims_group = QGroupBox("Maze Dimensions")
        dims_layout = QGridLayout(dims_group)
        self.dimension_spins: Dict[str, QSpinBox] = {}
        for row, axis in enumerate(AXES):
            spin = QSpinBox()
            spin.setRange(MIN_DIMENSION, self.controller.config.max_dimension)
            dims_layout.addWidget(QLabel(f"{axis.upper()}:"), row, 0)
            dims_layout.addWidget(spin, row, 1)
            self.dimension_spins[axis] = spin

        self.max_dimension_spin = QSpinBox()
        self.max_dimension_spin.setRange(MIN_MAX_DIMENSION, MAX_MAX_DIMENSION)
        dims_layout.addWidget(QLabel("Max:"), len(AXES), 0)
        dims_layout.addWidget(self.max_dimension_spin, len(AXES), 1)
        layout.addWidget(dims_group)

        # Endpoints
        self.point_spins: Dict[str, Dict[str, QSpinBox]] = {}
        for which, title in (("start", "Start Point"), ("end", "End Point")):
            group = QGroupBox(title)
            group_layout = QHBoxLayout(group)
            self.point_spins[which] = {}
            for axis in AXES:
                spin = QSpinBox()
                group_layout.addWidget(QLabel(f"{axis.upper()}:"))
                group_layout.addWidget(spin)
                self.point_spins[which][axis] = spin
            layout.addWidget(group)

        # Actions
        self.generate_btn = QPushButton("Generate Random Maze")
        self.solve_btn = QPushButton("Solve Maze")
        layout.addWidget(self.generate_btn)
        layout.addWidget(self.solve_btn)

        # View toggles
        view_group = QGroupBox("View")
        view_layout = QVBoxLayout(view_group)
        self.only_solution_cb = QCheckBox("Show Only Solution")
        self.show_grid_cb = QCheckBox("Show Grid")
        self.show_grid_cb.setChecked(True)
        view_layout.addWidget(self.only_solution_cb)
        view_layout.addWidget(self.show_grid_cb)
        layout.addWidget(view_group)

        # Statistics
        self.stats_display = QTextEdit()
        self.stats_display.setReadOnly(True)
        layout.addWidget(self.stats_display, 1)

        return panel

    def _setup_connections(self):
        """Setup signal connections."""
        for axis, spin in self.dimension_spins.items():
            spin.valueChanged.connect(lambda value, a=axis: self.controller.set_dimension(a, value))
        self.max_dimension_spin.valueChanged.connect(self._on_max_dimension_changed)

        for which, spins in self.point_spins.items():
            for axis, spin in spins.items():
                spin.valueChanged.connect(
                    lambda value, w=which, a=axis: self.controller.set_point(w, a, value)
                )

        self.generate_btn.clicked.connect(lambda: self.controller.generate())
        self.solve_btn.clicked.connect(self.controller.solve)

        self.only_solution_cb.toggled.connect(self.layer_view.set_show_only_solution)
        self.show_grid_cb.toggled.connect(self.layer_view.set_show_grid)

        # Controller signals
        self.controller.snapshot_changed.connect(self._sync_controls)
        self.controller.state_changed.connect(self._on_state_changed)
        self.controller.busy_changed.connect(self._on_busy_changed)
        self.controller.error_occurred.connect(self._on_error)

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        QShortcut(QKeySequence("G"), self, lambda: self.controller.generate())
        QShortcut(QKeySequence("S"), self, self.controller.solve)
        QShortcut(QKeySequence("F"), self, self.layer_view.fit_in_view)
        QShortcut(QKeySequence("0"), self, self.layer_view.reset_zoom)

        QShortcut(QKeySequence("Q"), self, self.close)
        QShortcut(QKeySequence("Ctrl+Q"), self, self.close)
        QShortcut(QKeySequence("Escape"), self, self.close)

    def _on_max_dimension_changed(self, value: int):
        applied = self.controller.set_max_dimension(value)
        for spin in self.dimension_spins.values():
            spin.setMaximum(applied)

    def _sync_controls(self, snapshot: MazeSnapshot):
        """Mirror the controller's (possibly clamped) values into the spin boxes."""
        spins = list(self.dimension_spins.values()) + [self.max_dimension_spin]
        for point_spins in self.point_spins.values():
            spins.extend(point_spins.values())
        for spin in spins:
            spin.blockSignals(True)

        config = self.controller.config
        self.max_dimension_spin.setValue(config.max_dimension)
        for axis, size in zip(AXES, snapshot.dimensions):
            self.dimension_spins[axis].setMaximum(config.max_dimension)
            self.dimension_spins[axis].setValue(size)
        for which, coord in (("start", snapshot.start), ("end", snapshot.end)):
            for axis, size, value in zip(AXES, snapshot.dimensions, coord):
                spin = self.point_spins[which][axis]
                spin.setRange(0, size - 1)
                spin.setValue(value)

        for spin in spins:
            spin.blockSignals(False)

        self.solve_btn.setEnabled(snapshot.has_maze and not self.controller.is_busy)
        self._update_statistics_display(snapshot)

    def _on_state_changed(self, state: MazeState):
        """Handle solve state change."""
        snapshot = self.controller.snapshot()
        if state == MazeState.SOLVED and snapshot.path:
            self.status_bar.showMessage(f"Solution found! Length: {snapshot.path_length} moves")
        elif state == MazeState.UNSOLVABLE:
            self.status_bar.showMessage("No solution exists for this maze configuration.")
        elif state == MazeState.REPAIRED:
            self.status_bar.showMessage("Maze was unsolvable and has been repaired - press Solve")
        else:
            self.status_bar.showMessage(f"State: {self.controller.get_state_description()}")

    def _on_busy_changed(self, busy: bool):
        self.generate_btn.setText("Generating..." if busy else "Generate Random Maze")
        self.solve_btn.setEnabled(not busy and self.controller.grid is not None)

    def _on_error(self, error_msg: str):
        """Handle error from controller."""
        self.status_bar.showMessage(f"Error: {error_msg}")

    def _update_statistics_display(self, snapshot: MazeSnapshot):
        """Update the statistics display from a snapshot."""
        x, y, z = snapshot.dimensions
        if snapshot.grid is not None:
            maze_info = (
                f"• Walls: {snapshot.grid.wall_count}\n"
                f"• Wall Density: {snapshot.grid.wall_density * 100:.1f}%"
            )
        else:
            maze_info = "• No maze - press Generate"

        if snapshot.path is None:
            path_info = "• Not solved"
        elif snapshot.path:
            path_info = f"• Path Length: {snapshot.path_length} moves ({len(snapshot.path)} cells)"
        else:
            path_info = "• No path shown"

        stats_text = f"""=== MAZE ===
• Size: {x}×{y}×{z}
{maze_info}
• Start: {snapshot.start}
• End: {snapshot.end}

=== SOLUTION ===
• State: {self.controller.get_state_description()}
{path_info}
• Repaired: {'yes' if snapshot.repaired else 'no'}

=== KEYBOARD SHORTCUTS ===
• G: Generate maze
• S: Solve maze
• F: Fit layers in view
• 0: Reset zoom
• Q/Esc: Quit application
"""
        self.stats_display.setText(stats_text)

    def closeEvent(self, event):
        """Stop background workers before closing."""
        self.controller.shutdown()
        event.accept()
