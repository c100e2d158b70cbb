import pygame
import pytest

from pathtracer.renderer.raytracer import Renderer


@pytest.fixture
def window(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    from pathtracer.preview import PreviewWindow
    win = PreviewWindow(8, 6, refresh_ms=10, save_path=tmp_path / "preview.png")
    yield win
    win.close()


def test_window_reports_finished_render(window, tiny_settings, grey_sphere_world, front_camera):
    job = Renderer(tiny_settings).start(grey_sphere_world, front_camera)
    job.wait()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert window.run(job) is True


def test_s_key_saves_current_image(window, tiny_settings, grey_sphere_world, front_camera):
    framebuffer = Renderer(tiny_settings).render(grey_sphere_world, front_camera)
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s))
    window.handle_events(framebuffer)
    assert window.save_path.exists()
