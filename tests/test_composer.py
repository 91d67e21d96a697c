import unittest

from catan_stage.domain.board import NUMBER_TOKENS, Terrain
from catan_stage.domain.randomizer import generate_board
from catan_stage.scene.camera import OrbitCamera
from catan_stage.scene.composer import compose_frame, pip_marker_centers, water_layers
from catan_stage.scene.geometry import blend
from catan_stage.scene.palette import available_palettes, get_palette


class ComposeFrameTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = generate_board(seed=17)
        self.palette = get_palette("light")
        self.frame = compose_frame(self.board, OrbitCamera.default(), 800, 600, palette=self.palette)

    def test_background_and_water_come_first(self) -> None:
        self.assertEqual(self.frame.background, self.palette.sky)
        first = self.frame.primitives[0]
        self.assertEqual(first.kind, "polygon")
        self.assertIsNone(first.position)
        self.assertEqual(first.fill, blend(self.palette.sky, self.palette.water, self.palette.water_opacity))
        water = [primitive for primitive in self.frame.primitives if primitive.position is None]
        self.assertEqual(len(water), 4)

    def test_every_token_and_the_desert_get_a_label(self) -> None:
        labels = [primitive.text for primitive in self.frame.texts()]
        self.assertIn("DESERT", labels)
        token_labels = sorted(int(text) for text in labels if text != "DESERT")
        self.assertEqual(token_labels, sorted(NUMBER_TOKENS))

    def test_red_tokens_use_the_highlight_color(self) -> None:
        for primitive in self.frame.texts():
            if primitive.text in ("6", "8"):
                self.assertEqual(primitive.fill, self.palette.coin_hot_text)
            elif primitive.text != "DESERT":
                self.assertEqual(primitive.fill, self.palette.coin_text)
        hot_markers = [
            primitive
            for primitive in self.frame.polygons()
            if primitive.fill == self.palette.pip_hot_marker
        ]
        self.assertEqual(len(hot_markers), 4 * 5)

    def test_textures_are_requested_for_non_desert_tops(self) -> None:
        textured = [primitive for primitive in self.frame.primitives if primitive.texture is not None]
        self.assertEqual(len(textured), 18)
        self.assertTrue(all(primitive.terrain is not Terrain.DESERT for primitive in textured))

    def test_tiles_paint_far_to_near(self) -> None:
        tile_positions = [primitive.position for primitive in self.frame.primitives if primitive.position is not None]
        self.assertIn(tile_positions[0], {0, 1, 2})
        self.assertIn(tile_positions[-1], {16, 17, 18})

    def test_pip_markers_are_centered_on_the_tile(self) -> None:
        centers = pip_marker_centers((1.0, 0.35, 2.0), 5)
        self.assertEqual(len(centers), 5)
        self.assertAlmostEqual(sum(center[0] for center in centers) / 5, 1.0)
        self.assertEqual(pip_marker_centers((0.0, 0.0, 0.0), 0), [])

    def test_every_palette_composes(self) -> None:
        for key in available_palettes():
            frame = compose_frame(self.board, OrbitCamera.default(), 320, 240, palette=get_palette(key))
            self.assertEqual(frame.background, get_palette(key).sky)
            self.assertTrue(frame.polygons())


class WaterLayerTests(unittest.TestCase):
    def test_layer_sizes_and_motion(self) -> None:
        layers = water_layers(0.0)
        self.assertEqual([layer.size for layer in layers], [180.0, 170.0, 160.0])
        self.assertAlmostEqual(layers[0].rotation, 0.0)
        later = water_layers(1.7)
        self.assertNotEqual(layers[0].rotation, later[0].rotation)
        for layer in later:
            self.assertLessEqual(abs(layer.rotation), 0.02)

    def test_unknown_palette_falls_back_to_light(self) -> None:
        self.assertEqual(get_palette("neon").key, "light")


if __name__ == "__main__":
    unittest.main()
