"""
VecDraw Figure Module

A Figure binds one Geometry, one Transform and one Style, plus a
reference to the (stateless, shared) Renderer that paints it.
A GroupFigure is a composite over other drawables; its geometry is
synthesized from the transformed bounds of its members.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, List, Tuple, Union

from .geometry import BoundingBox, Geometry, Path
from .style import Style
from .transform import Transform, compose

if TYPE_CHECKING:
    from ..graphics.renderer import Renderer


def _shared_renderer() -> 'Renderer':
    # Import here to avoid circular imports
    from ..graphics.renderer import default_renderer
    return default_renderer


@dataclass(eq=False)
class Figure:
    """
    One drawable shape instance.

    All fields are plain attributes; the editor reads and writes them
    directly.
    """
    geometry: Geometry
    transform: Transform = field(default_factory=Transform)
    style: Style = field(default_factory=Style)
    renderer: Any = field(default_factory=_shared_renderer)

    def transformed_path(self) -> Path:
        """Local path with this figure's transform applied."""
        return self.transform.apply_path(self.geometry.local_path())

    @property
    def bounds(self) -> BoundingBox:
        """World-space bounds."""
        return self.transformed_path().bounds


@dataclass(eq=False)
class GroupFigure:
    """
    Composite figure over an ordered list of members.

    The member list is shared with the caller, so edits to a member
    after grouping are visible through the group. The group's own
    transform is applied on top of every member transform.
    """
    figures: List['Drawable'] = field(default_factory=list)
    transform: Transform = field(default_factory=Transform)
    style: Style = field(default_factory=lambda: Style(None, None))
    renderer: Any = field(default_factory=_shared_renderer)

    @property
    def geometry(self) -> Geometry:
        """Box geometry covering every member's transformed path."""
        return Geometry.bounding(members_bounds(self.figures))

    def transformed_path(self) -> Path:
        return self.transform.apply_path(self.geometry.local_path())

    @property
    def bounds(self) -> BoundingBox:
        return self.transformed_path().bounds


Drawable = Union[Figure, GroupFigure]


def members_bounds(figures: List[Drawable]) -> BoundingBox:
    """Union of the world bounds of a list of drawables."""
    result = None
    for figure in figures:
        box = figure.bounds
        result = box if result is None else result.union(box)
    if result is None:
        return BoundingBox(0.0, 0.0, 0.0, 0.0)
    return result


def iter_leaves(drawable: Drawable,
                outer: Transform = None) -> Iterator[Tuple[Figure, Transform]]:
    """
    Walk a drawable tree in paint order.

    Yields (figure, world_transform) pairs where world_transform is the
    figure's own transform composed inside every enclosing group
    transform.
    """
    if outer is None:
        outer = Transform()
    if isinstance(drawable, GroupFigure):
        inner = compose(outer, drawable.transform)
        for member in drawable.figures:
            yield from iter_leaves(member, inner)
    else:
        yield drawable, compose(outer, drawable.transform)
