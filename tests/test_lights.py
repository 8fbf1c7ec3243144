import numpy as np
import pytest

from metaphor.lights import ColorLight, DirectionLight, Light, PointLight


def _direction_light():
    return DirectionLight(
        (-10.0, 10.0, 0.0),
        (1.0, 0.5, 0.25),
        0.2,
        (0.3, 0.3, 0.3),
        0.5,
        8.0,
        (4.0, -5.0, 0.0),
        2.0,
    )


def test_light_is_abstract():
    with pytest.raises(TypeError):
        Light((0, 0, 0), (1, 1, 1), 0.2, 0.5, 8.0)


def test_fundamentals_carry_constructor_values():
    light = _direction_light()
    values = light.fundamentals()
    assert set(values) == {
        "lightPos",
        "lightColor",
        "ambientStr",
        "ambientColor",
        "specStr",
        "specPhong",
    }
    np.testing.assert_allclose(values["lightPos"], (-10.0, 10.0, 0.0))
    np.testing.assert_allclose(values["lightColor"], (1.0, 0.5, 0.25))
    assert values["ambientStr"] == 0.2
    assert values["specStr"] == 0.5
    assert values["specPhong"] == 8.0


def test_ambient_color_follows_light_color():
    light = _direction_light()
    np.testing.assert_allclose(light.fundamentals()["ambientColor"], light.color)


def test_direction_light_specifics():
    light = _direction_light()
    specifics = light.specifics()
    np.testing.assert_allclose(specifics["direction"], (4.0, -5.0, 0.0))
    assert specifics["dl_brightness"] == 2.0


def test_direction_light_brightness_change_is_reported():
    light = _direction_light()
    light.brightness = 3.5
    assert light.uniforms()["dl_brightness"] == 3.5


def test_uniforms_combine_fundamentals_and_specifics():
    light = _direction_light()
    combined = light.uniforms()
    assert set(combined) == set(light.fundamentals()) | set(light.specifics())


def test_point_light_specifics_and_position():
    light = PointLight((0, 0, 0), (1, 1, 1), 0.2, (1, 1, 1), 0.5, 8.0, 1.0)
    assert light.specifics() == {"brightness": 1.0}
    light.position = np.array([1.0, 2.0, 3.0])
    light.brightness = 4.0
    uniforms = light.uniforms()
    np.testing.assert_allclose(uniforms["lightPos"], (1.0, 2.0, 3.0))
    assert uniforms["brightness"] == 4.0


def test_color_light_defaults_to_white():
    assert ColorLight().uniforms() == {"red": 1.0, "green": 1.0, "blue": 1.0}


def test_color_light_set_color():
    light = ColorLight()
    light.set_color(0.1, 0.2, 0.3)
    assert light.uniforms() == {"red": 0.1, "green": 0.2, "blue": 0.3}


def test_color_light_set_color_from_triple():
    light = ColorLight()
    rgb = (0.4, 0.5, 0.6)
    light.set_color(*rgb)
    assert (light.red, light.green, light.blue) == rgb