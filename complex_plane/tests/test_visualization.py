"""Tests for domain-coloring rendering and the gallery script."""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import pytest
import numpy as np

from complex_plane.value import Complex, ONE
from complex_plane.coloring import domain_color
from complex_plane.functions import sin
from complex_plane.visualization import (
    PlotConfig, render_domain_coloring, domain_coloring_image,
    plot_domain_coloring, plot_function_gallery
)
from complex_plane.experiments.gallery import main, run_identity_checks


class TestRendering:
    """Test suite for image and sink rendering."""

    def test_sink_receives_every_pixel(self):
        pixels = {}

        def sink(row, col, rgb):
            pixels[(row, col)] = rgb

        render_domain_coloring(sin, sink, resolution=6)
        assert len(pixels) == 36
        assert all(len(rgb) == 3 for rgb in pixels.values())

    def test_sink_orientation(self):
        pixels = {}
        render_domain_coloring(lambda z: z, lambda r, c, rgb: pixels.__setitem__((r, c), rgb),
                               xlim=(-1.0, 1.0), ylim=(-1.0, 1.0), resolution=3)
        assert pixels[(0, 0)] == domain_color(Complex(-1.0, -1.0))
        assert pixels[(2, 2)] == domain_color(Complex(1.0, 1.0))

    def test_image_matches_sink(self):
        pixels = np.zeros((8, 8, 3))

        def sink(row, col, rgb):
            pixels[row, col] = rgb

        render_domain_coloring(sin, sink, resolution=8)
        img = domain_coloring_image(sin, resolution=8)
        assert img.shape == (8, 8, 3)
        assert np.all((img >= 0.0) & (img <= 1.0))
        assert np.allclose(img, pixels, atol=1e-5)

    def test_accepts_builtin_complex_functions(self):
        img = domain_coloring_image(lambda z: complex(z) ** 2, resolution=4)
        assert img.shape == (4, 4, 3)

    def test_non_finite_pixels_are_black(self):
        with pytest.warns(RuntimeWarning, match="not finite"):
            img = domain_coloring_image(lambda z: ONE.divides(Complex(0)), resolution=4)
        assert np.all(img == 0.0)


class TestPlots:
    """Test suite for matplotlib figures."""

    @pytest.fixture
    def config(self):
        return PlotConfig(figsize=(3, 3), dpi=50)

    def test_plot_domain_coloring(self, config, tmp_path):
        save_path = tmp_path / "sin.png"
        fig = plot_domain_coloring(sin, 'sin', resolution=10, config=config,
                                   save_path=str(save_path))
        assert isinstance(fig, plt.Figure)
        assert save_path.exists()
        plt.close(fig)

    def test_plot_function_gallery(self, config):
        fig = plot_function_gallery(['sin', 'cos', 'exp', 'ln', 'tanh'], resolution=6, config=config)
        visible = [ax for ax in fig.axes if ax.get_visible()]
        assert len(visible) == 5
        assert len(fig.axes) == 8
        plt.close(fig)

    def test_gallery_requires_names(self, config):
        with pytest.raises(ValueError):
            plot_function_gallery([], config=config)

    def test_gallery_unknown_name(self, config):
        with pytest.raises(ValueError):
            plot_function_gallery(['nope'], resolution=4, config=config)


class TestGalleryScript:
    """Test suite for the gallery command line entry point."""

    def test_combined_gallery(self, tmp_path):
        code = main(["--functions", "sin", "exp", "--resolution", "6",
                     "--outdir", str(tmp_path)])
        assert code == 0
        assert (tmp_path / "gallery.png").exists()

    def test_separate_images_and_identity_checks(self, tmp_path, capsys):
        code = main(["--functions", "cosh", "arcsin", "--resolution", "6", "--separate",
                     "--outdir", str(tmp_path), "--check-identities"])
        assert code == 0
        assert (tmp_path / "cosh.png").exists()
        assert (tmp_path / "arcsin.png").exists()
        out = capsys.readouterr().out
        assert "IDENTITY CHECKS" in out
        assert "Non-finite" in out

    def test_failed_identity_check(self):
        assert not run_identity_checks(resolution=5, tolerance=-1.0)

    def test_tolerance_flag(self, tmp_path):
        args = ["--functions", "exp", "--resolution", "4", "--outdir", str(tmp_path),
                "--check-identities"]
        assert main(args + ["--tolerance", "1e-9"]) == 0
        assert main(args + ["--tolerance", "-1"]) == 1


if __name__ == "__main__":
    pytest.main([__file__])
