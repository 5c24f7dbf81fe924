from unittest.mock import patch

from imgserver.__main__ import main


class TestMain:
    @patch("imgserver.__main__.configure_logging")
    @patch("imgserver.__main__.uvicorn")
    def test_runs_uvicorn(self, mock_uvicorn, mock_configure):
        main()

        mock_configure.assert_called_once()
        args, kwargs = mock_uvicorn.run.call_args
        assert args == ("web.app:app",)
        assert kwargs["log_config"] is None
