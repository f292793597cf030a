"""Tests for the command-line scripts."""

import numpy as np

import batch_process
import main
from pathquilt.utils import load_texture, save_image


class TestMain:
    def test_synthesizes_file(self, tmp_path, noise_exemplar):
        src = tmp_path / "in.png"
        out = tmp_path / "out" / "result.png"
        seams = tmp_path / "seams.png"
        save_image(noise_exemplar, str(src))
        code = main.main(["--input", str(src), "--output", str(out), "--tile-size", "8",
                          "--overlap", "2", "--candidates", "8", "--seed", "0",
                          "--output-width", "30", "--output-height", "20",
                          "--seams", str(seams), "--evaluate"])
        assert code == 0
        assert load_texture(str(out)).shape == (20, 30, 3)
        assert seams.exists()

    def test_default_size_and_ratio(self, tmp_path, noise_exemplar):
        src = tmp_path / "in.png"
        out = tmp_path / "result.png"
        save_image(noise_exemplar, str(src))
        code = main.main(["--input", str(src), "--output", str(out), "--tile-size", "12",
                          "--candidates", "4", "--seed", "1"])
        assert code == 0
        assert load_texture(str(out)).shape == (48, 48, 3)

    def test_missing_input(self, tmp_path):
        assert main.main(["--input", str(tmp_path / "nope.png")]) == 1

    def test_bad_configuration(self, tmp_path, noise_exemplar):
        src = tmp_path / "in.png"
        save_image(noise_exemplar, str(src))
        code = main.main(["--input", str(src), "--output", str(tmp_path / "o.png"),
                          "--tile-size", "8", "--overlap", "8"])
        assert code == 1
        assert not (tmp_path / "o.png").exists()


class TestBatchProcess:
    def test_processes_directory(self, tmp_path, noise_exemplar):
        data = tmp_path / "data"
        results = tmp_path / "results"
        save_image(noise_exemplar, str(data / "a.png"))
        save_image(np.flipud(noise_exemplar).copy(), str(data / "b.png"))
        (data / "notes.txt").write_text("skip me")

        code = batch_process.main(["--data_dir", str(data), "--results_dir", str(results),
                                   "--output_width", "20", "--output_height", "16",
                                   "--tile_size", "8", "--overlap", "2",
                                   "--candidates", "4", "--seed", "0"])
        assert code == 0
        written = sorted(p.name for p in results.iterdir())
        assert written == ["a_quilted_w20_h16_t8_o2.png", "b_quilted_w20_h16_t8_o2.png"]

    def test_too_small_exemplar_reported(self, tmp_path):
        data = tmp_path / "data"
        save_image(np.full((4, 4, 3), 7, dtype=np.uint8), str(data / "tiny.png"))
        code = batch_process.main(["--data_dir", str(data), "--results_dir", str(tmp_path / "r"),
                                   "--tile_size", "8", "--overlap", "2"])
        assert code == 1

    def test_missing_directory(self, tmp_path):
        assert batch_process.main(["--data_dir", str(tmp_path / "none")]) == 1

    def test_find_images_sorted(self, tmp_path):
        for name in ("b.PNG", "a.jpg", "c.txt"):
            (tmp_path / name).write_bytes(b"")
        names = [p.rsplit("/", 1)[-1] for p in batch_process.find_images(str(tmp_path))]
        assert names == ["a.jpg", "b.PNG"]
