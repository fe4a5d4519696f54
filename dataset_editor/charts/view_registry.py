from __future__ import annotations
from typing import Dict, List, Optional, Type

from dataset_editor.config import EditorSettings
from dataset_editor.core.dataset import Dataset
from dataset_editor.core.exceptions import UnknownChartError

from .base_view import ChartView


class ViewRegistry:
    """
    Registry for chart view classes so a charting surface can offer chart types dynamically

    Purpose:
    - Decouples the charting surface from hardcoded chart implementations by exposing {@link create(view_id, dataset)}
    - Lets chart pickers be built from the registered views rather than hardcoded lists

    Design Notes:
    - Stores the subclasses of {@link ChartView}, not instances, so that each chart is instantiated on demand
    - Enforces variants:
        * only {@link ChartView} subclasses can be registered
        * each view 'id' is unique across the registry
    """

    def __init__(self):
        self._views: Dict[str, Type[ChartView]] = {}

    def register(self, view_cls: Type[ChartView]) -> None:
        """
        Register a {@link ChartView} with the registry

        :param view_cls: the subclass of {@link ChartView}

        Raises:
            TypeError: if view_cls is not a subclass of {@link ChartView}
            ValueError: if a view with same 'id' already exists
        """

        if not isinstance(view_cls, type) or not issubclass(view_cls, ChartView):
            raise TypeError(f"View '{getattr(view_cls, 'id', view_cls)}' must be a subclass of ChartView")

        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._views[view_cls.id] = view_cls

    def create(
        self, view_id: str, dataset: Optional[Dataset], settings: Optional[EditorSettings] = None
    ) -> ChartView:
        """
        Instantiate a view for the given view_id over a (read-only) dataset
        :param view_id: the id of the view
        :param dataset: the dataset of record, or None for the sample chart
        :return cls(): the instantiated view

        Raises:
            UnknownChartError: if no view with the given id exists in the registry
        """
        try:
            cls = self._views[view_id]
        except KeyError:
            raise UnknownChartError(f"View '{view_id}' not found")
        return cls(dataset, settings)

    def all_classes(self) -> List[Type[ChartView]]:
        return list(self._views.values())


def create_default_registry() -> ViewRegistry:
    """Registry with every built-in chart view."""
    from .views import (
        AreaChartView,
        BarChartView,
        DonutChartView,
        FunnelChartView,
        HistogramChartView,
        LineChartView,
        PieChartView,
        ScatterChartView,
        TreemapChartView,
    )

    registry = ViewRegistry()
    for view_cls in (
        BarChartView,
        LineChartView,
        AreaChartView,
        HistogramChartView,
        PieChartView,
        DonutChartView,
        FunnelChartView,
        TreemapChartView,
        ScatterChartView,
    ):
        registry.register(view_cls)
    return registry
