"""Tests for appconfig.config.env_file: dotenv merging and template"""

from appconfig.config.env_file import read_environment, render_example_env
from appconfig.config.loader import field_sources, load_config


class TestReadEnvironment:
    def test_file_values_loaded(self, env_file):
        raw = read_environment(env_file, environ={})
        assert raw["PORT"] == "3000"
        assert raw["DATABASE_NAME"] == "postgres"

    def test_process_environment_wins(self, env_file):
        raw = read_environment(env_file, environ={"PORT": "4000"})
        assert raw["PORT"] == "4000"
        assert raw["DATABASE_HOST"] == "localhost"

    def test_uses_os_environ_by_default(self, env_file, set_environ):
        set_environ({"DATABASE_HOST": "db.from.env"})
        raw = read_environment(env_file)
        assert raw["DATABASE_HOST"] == "db.from.env"

    def test_missing_file_is_not_an_error(self, tmp_path):
        raw = read_environment(tmp_path / "absent.env", environ={"PORT": "1"})
        assert raw == {"PORT": "1"}

    def test_no_file(self):
        assert read_environment(None, environ={"A": "b"}) == {"A": "b"}

    def test_empty_and_bare_keys_become_empty_strings(self, tmp_path):
        path = tmp_path / ".env"
        path.write_text("DATABASE_PASSWORD=\nDATABASE_NAME\n")
        raw = read_environment(path, environ={})
        assert raw["DATABASE_PASSWORD"] == ""
        assert raw["DATABASE_NAME"] == ""

    def test_dollar_references_kept_verbatim(self, tmp_path, set_environ):
        set_environ({"HOME": "/root"})
        path = tmp_path / ".env"
        path.write_text("DATABASE_PASSWORD=ab${HOME}cd\nDATABASE_HOST=${DB_HOST:-localhost}\n")
        raw = read_environment(path, environ={})
        assert raw["DATABASE_PASSWORD"] == "ab${HOME}cd"
        assert raw["DATABASE_HOST"] == "${DB_HOST:-localhost}"

    def test_comments_and_quotes(self, tmp_path):
        path = tmp_path / ".env"
        path.write_text('# comment\nDATABASE_PASSWORD="p@ss word"\n')
        raw = read_environment(path, environ={})
        assert raw == {"DATABASE_PASSWORD": "p@ss word"}


class TestExampleEnv:
    def test_lists_every_variable(self):
        template = render_example_env()
        for variable in field_sources().values():
            assert f"{variable}=" in template

    def test_template_is_valid_configuration(self, tmp_path):
        path = tmp_path / ".env.example"
        path.write_text(render_example_env())
        config = load_config(read_environment(path, environ={}))
        assert config.port == 3000
        assert config.database.port == 5432
