"""crashviz package initializer.

This package contains the data and charting modules used by the Shiny
application.  Modules include record loading, filtering and aggregation,
scales and the Plotly chart renderers.  See individual module docstrings
for details.
"""

__version__ = "0.1.0"
