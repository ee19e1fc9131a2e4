"""Framebuffer pixel packing and degraded initialization."""

from __future__ import annotations

import numpy as np
from PIL import Image

from managers.framebuffer_manager import FramebufferManager, fit_to_size, pack_frame


def test_pack_rgb565() -> None:
    pixels = np.array([[[255, 0, 0], [0, 255, 0], [0, 0, 255], [255, 255, 255]]], dtype=np.uint8)
    packed = pack_frame(pixels, 16)

    assert packed.dtype == np.uint16
    assert packed.tolist() == [[0xF800, 0x07E0, 0x001F, 0xFFFF]]


def test_pack_xrgb8888() -> None:
    pixels = np.array([[[0x12, 0x34, 0x56]]], dtype=np.uint8)
    packed = pack_frame(pixels, 32)

    assert packed.dtype == np.uint32
    assert int(packed[0, 0]) == 0xFF123456


def test_fit_to_size_letterboxes_portrait_frame() -> None:
    frame = Image.new('RGB', (400, 600), (255, 0, 0))
    fitted = fit_to_size(frame, 800, 600)

    assert fitted.size == (800, 600)
    assert fitted.getpixel((10, 300)) == (0, 0, 0)
    assert fitted.getpixel((400, 300)) == (255, 0, 0)


def test_missing_device_leaves_manager_disabled(tmp_path) -> None:
    manager = FramebufferManager(fb_device=str(tmp_path / "fb-missing"), info_dir=str(tmp_path))

    assert manager.initialize() is False
    assert manager.is_available is False
    assert manager.display_frame(Image.new('RGB', (4, 4))) is False


def test_display_frame_writes_file_backed_buffer(tmp_path) -> None:
    (tmp_path / "virtual_size").write_text("4,2\n")
    (tmp_path / "bits_per_pixel").write_text("16\n")
    device = tmp_path / "fb0"
    device.write_bytes(b"\x00" * (4 * 2 * 2))

    manager = FramebufferManager(fb_device=str(device), info_dir=str(tmp_path))
    assert manager.initialize() is True

    assert manager.display_frame(Image.new('RGB', (4, 2), (255, 0, 0))) is True
    assert manager.fb_array.tolist() == [[0xF800] * 4] * 2
    manager.cleanup()

    assert manager.is_available is False
    assert np.frombuffer(device.read_bytes(), dtype=np.uint16).tolist() == [0xF800] * 8


def test_clear_screen_fills_packed_color(tmp_path) -> None:
    (tmp_path / "virtual_size").write_text("3,2\n")
    (tmp_path / "bits_per_pixel").write_text("32\n")
    device = tmp_path / "fb0"
    device.write_bytes(b"\x00" * (3 * 2 * 4))

    manager = FramebufferManager(fb_device=str(device), info_dir=str(tmp_path))
    assert manager.clear_screen() is False

    manager.initialize()
    assert manager.clear_screen((0, 0, 255)) is True
    manager.cleanup()

    assert np.frombuffer(device.read_bytes(), dtype=np.uint32).tolist() == [0xFF0000FF] * 6
