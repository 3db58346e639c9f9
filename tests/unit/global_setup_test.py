import logging

import scripts.global_setup as global_setup_module
from scripts.global_setup import global_setup


class TestGlobalSetup:

    def test_creates_result_dirs_once(self, tmp_path, monkeypatch, caplog):
        results = tmp_path / "test-results"
        dirs = [results, results / "screenshots", results / "videos", results / "traces", results / "html-report"]
        monkeypatch.setattr(global_setup_module, "RESULT_DIRS", dirs)

        with caplog.at_level(logging.INFO, logger="scripts.global_setup"):
            created = global_setup(browser_project="chromium", headless=True, reruns=2)

        assert created == dirs
        assert all(d.is_dir() for d in dirs)
        assert "Base URL" in caplog.text
        assert "Retries: 2" in caplog.text

        # 目录已存在时不重复创建
        assert global_setup(browser_project="chromium", headless=True, reruns=0) == []
