"""Typed option records accepted by chart entities.

Structural fields (lists of points, references, order) are checked by
pydantic when the record is built. Style fields are kept loose here and are
routed through the entity setters, so they fail with the same errors as a
direct assignment would.
"""

from typing import Annotated, Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

# Strict: no "3" -> 3 or True -> 1 coercion
LabelValue = Optional[Union[StrictStr, StrictInt, StrictFloat]]
NumericValue = Optional[Union[StrictInt, StrictFloat]]

O = TypeVar("O", bound=BaseModel)


class SeriesOptions(BaseModel):
    """Options shared by every chart series."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    title_ref: Optional[str] = Field(default=None, description="Cell reference holding the title, e.g. Sheet1!$B$1")
    order: Optional[Annotated[StrictInt, Field(ge=0)]] = None


class LineSeriesOptions(SeriesOptions):
    labels: Optional[List[LabelValue]] = None
    labels_ref: Optional[str] = None
    data: Optional[List[NumericValue]] = None
    data_ref: Optional[str] = None
    format_code: str = "General"

    color: Optional[Any] = None
    show_marker: Optional[Any] = None
    marker_symbol: Optional[Any] = None
    smooth: Optional[Any] = None
    line_type: Optional[Any] = None


class LineChartOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    grouping: Optional[Any] = None
    vary_colors: Optional[Any] = None
    show_marker: Optional[Any] = None
    ax_ids: Tuple[int, int] = (500000001, 500000002)


def coerce_options(cls: Type[O], options: Union[BaseModel, Mapping[str, Any], None], overrides: Mapping[str, Any]) -> O:
    """Build a ``cls`` record from a record, a mapping or nothing, with keyword overrides on top."""
    if isinstance(options, cls) and not overrides:
        return options
    base: Dict[str, Any]
    if options is None:
        base = {}
    elif isinstance(options, BaseModel):
        base = options.model_dump(exclude_unset=True)
    else:
        base = dict(options)
    return cls.model_validate({**base, **overrides})
