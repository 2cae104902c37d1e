import pytest

from accent.spaces import Model, Space


@pytest.mark.parametrize(
    "model, count",
    [
        (Model.RGB, 3),
        (Model.HSL, 3),
        (Model.LAB, 3),
        (Model.CMYK, 4),
        (Model.EXTRA, 3),
    ],
)
def test_channel_count(model, count):
    assert model.channel_count() == count


@pytest.mark.parametrize(
    "space, model",
    [
        (Space.DP3, Model.RGB),
        (Space.SRGB, Model.RGB),
        (Space.LINEAR, Model.RGB),
        (Space.HSL, Model.HSL),
        (Space.HSV, Model.HSL),
        (Space.LAB, Model.LAB),
        (Space.OKLAB, Model.LAB),
        (Space.OKLCH, Model.LAB),
        (Space.HEX, Model.EXTRA),
        (Space.XYZ, Model.EXTRA),
    ],
)
def test_bound_spaces(space, model):
    assert space.model() is model


@pytest.mark.parametrize(
    "space",
    [Space.ACES, Space.ADOBE, Space.HWB, Space.LUV, Space.SWOP, Space.FOG39],
)
def test_unbound_spaces_raise(space):
    with pytest.raises(ValueError, match="not bound"):
        space.model()


def _bound_models():
    bound = []
    for space in list(Space):
        try:
            bound.append(Space.model(space))
        except ValueError:
            pass
    return bound


def test_no_space_uses_cmyk_yet():
    bound = _bound_models()
    assert Model.CMYK not in bound
    assert len(bound) == 10
    assert bound.count(Model.RGB) == 3


def test_space_lookup_by_name():
    assert Space("Display P3") is Space.DP3
    assert Space["OKLCH"].value == "OKLCH"