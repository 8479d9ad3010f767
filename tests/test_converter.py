import pytest
from PIL import Image

from gbdk_png_converter.converter import (
    ConvertOptions,
    convert_image,
    convert_png_to_gameboy,
    default_output_path,
    gbdk_source_path,
    generate_gbdk_code,
)
from gbdk_png_converter.errors import ConversionError, UnquantizedInputError
from gbdk_png_converter.palette import GAMEBOY_PALETTE
from gbdk_png_converter.testimage import create_test_image, save_test_image


def test_output_path_helpers(tmp_path) -> None:
    source = tmp_path / "art" / "hero.png"
    assert default_output_path(source) == tmp_path / "art" / "hero_gameboy.png"
    assert gbdk_source_path(tmp_path / "hero_gameboy.png") == tmp_path / "hero_gameboy.c"


def test_convert_png_to_gameboy_writes_palette_image(tmp_path) -> None:
    source = save_test_image(tmp_path / "test_image.png", 20, 12)
    target = tmp_path / "out.png"

    result = convert_png_to_gameboy(source, target)

    assert (result.width, result.height) == (20, 12)
    assert result.output_path == target
    with Image.open(target) as img:
        assert img.size == (20, 12)
        colors = {pixel[:3] for pixel in img.convert("RGBA").get_flattened_data()}
    assert colors <= set(GAMEBOY_PALETTE)


def test_convert_keeps_alpha(tmp_path) -> None:
    source = tmp_path / "alpha.png"
    Image.new("RGBA", (2, 2), (200, 200, 200, 77)).save(source)

    convert_png_to_gameboy(source, tmp_path / "alpha_out.png")

    with Image.open(tmp_path / "alpha_out.png") as img:
        assert img.convert("RGBA").getpixel((1, 1)) == (155, 188, 15, 77)


def test_convert_image_defaults(tmp_path) -> None:
    source = save_test_image(tmp_path / "sprite.png", 16, 16)

    result = convert_image(source)

    assert result.conversion.output_path == tmp_path / "sprite_gameboy.png"
    assert result.conversion.output_path.exists()
    assert result.gbdk is None
    assert not (tmp_path / "sprite_gameboy.c").exists()


def test_convert_image_with_gbdk(tmp_path) -> None:
    source = save_test_image(tmp_path / "sprite.png", 16, 16)
    options = ConvertOptions(
        output_path=tmp_path / "player.png",
        generate_gbdk=True,
        variable_name="player-sprite",
        timestamp=False,
    )

    result = convert_image(source, options)

    assert result.gbdk is not None
    assert result.gbdk.output_path == tmp_path / "player.c"
    assert result.gbdk.base_name == "player_sprite"
    assert result.gbdk.tiles_generated == 4
    assert result.gbdk.data_size == 64
    text = (tmp_path / "player.c").read_text(encoding="utf-8")
    assert "const unsigned char player_sprite_data[] = {" in text
    assert "#define PLAYER_SPRITE_TILE_COUNT 4\n" in text
    assert "#define PLAYER_SPRITE_SIZE 64\n" in text
    assert "Generated on" not in text


def test_generate_gbdk_code_uses_image_name(tmp_path) -> None:
    image_path = tmp_path / "title screen.png"
    Image.new("RGB", (8, 8), GAMEBOY_PALETTE[3]).save(image_path)

    result = generate_gbdk_code(image_path, tmp_path / "title.c")

    text = (tmp_path / "title.c").read_text(encoding="utf-8")
    assert result.base_name == "title_screen"
    assert "const unsigned char title_screen_data[] = {" in text
    assert "    0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF,\n" in text
    assert "// Generated on: " in text


def test_generate_gbdk_code_strict_rejects_raw_image(tmp_path) -> None:
    image_path = tmp_path / "raw.png"
    create_test_image(8, 8).save(image_path)

    with pytest.raises(UnquantizedInputError):
        generate_gbdk_code(image_path, tmp_path / "raw.c", strict=True)
    assert not (tmp_path / "raw.c").exists()


def test_convert_image_missing_file(tmp_path) -> None:
    with pytest.raises(ConversionError, match="not found"):
        convert_image(tmp_path / "missing.png")


def test_convert_image_rejects_non_png(tmp_path) -> None:
    source = tmp_path / "photo.jpg"
    source.write_bytes(b"")
    with pytest.raises(ConversionError, match="expected .png"):
        convert_image(source)


def test_convert_image_rejects_corrupt_png(tmp_path) -> None:
    source = tmp_path / "broken.png"
    source.write_bytes(b"not a png")
    with pytest.raises(ConversionError, match="Failed to read PNG"):
        convert_image(source)
    assert not (tmp_path / "broken_gameboy.png").exists()


def test_create_test_image_gradient() -> None:
    image = create_test_image(64, 64)
    assert image.size == (64, 64)
    assert image.getpixel((0, 0)) == (0, 0, 0)
    assert image.getpixel((63, 0)) == (251, 0, 125)
    assert image.getpixel((32, 16)) == (127, 63, 95)
