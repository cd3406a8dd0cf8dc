import pytest

from game.config import WalkthroughSettings
from game.scene import SceneNode, Transform
from game.world import create_world
from rendering.wireframe_primitives import create_box_mesh

VIEWPORT = (800, 600)


def box_node(name, center, size, parent=None):
    """A node at ``center`` carrying a box mesh of ``size`` around its origin."""
    node = SceneNode(name=name, transform=Transform(position=center), mesh=create_box_mesh(size))
    if parent is not None:
        parent.add(node)
    return node


def avatar_node():
    # Feet on the origin, 0.5 wide, 1.8 tall, 0.3 deep.
    return SceneNode(name="Walker", mesh=create_box_mesh((0.5, 1.8, 0.3), (0.0, 0.9, 0.0)))


@pytest.fixture
def make_world():
    def _make(start=(0.0, 0.0, 0.0), house=None, **overrides):
        settings = WalkthroughSettings(avatar_start=start, **overrides)
        world = create_world(settings, VIEWPORT)
        if house is not None:
            world.attach_assets(house, avatar_node())
        return world

    return _make
