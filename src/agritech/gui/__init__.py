"""Desktop dashboard built with PySide6/Qt and pyqtgraph.

Screens in :mod:`gui.tabs` render the snapshots and gauge values published by
:mod:`agritech.core` controllers, while :mod:`gui.widgets` houses the shared
gauge and stat widgets. This layer owns the Qt timers; the simulation itself
lives entirely in :mod:`agritech.core`.
"""
