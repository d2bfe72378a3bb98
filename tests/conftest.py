"""
Pytest configuration and fixtures.
"""
import sys
import os
import pytest

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))


@pytest.fixture
def options():
    """Default export options with the 1.25 width scale factor."""
    from recordsheet.options import ExportOptions
    return ExportOptions()


@pytest.fixture
def sales_records():
    """Two product rows matching a PRODUCT:Text, CA_NET:Integer schema."""
    return [
        {'PRODUCT': 'A', 'CA_NET': 10},
        {'PRODUCT': 'B', 'CA_NET': 20},
    ]


@pytest.fixture
def sales_schema():
    from recordsheet.constants import TypeTag
    return [('PRODUCT', TypeTag.TEXT), ('CA_NET', TypeTag.INTEGER)]


@pytest.fixture
def sales_pivot():
    from recordsheet.constants import AggregationFunction
    from recordsheet.models import PivotSettings
    return PivotSettings(row_labels=['PRODUCT'], column_labels={'CA_NET': AggregationFunction.SUM})


@pytest.fixture
def tmp_workbook_path(tmp_path):
    return str(tmp_path / 'export.xlsx')
