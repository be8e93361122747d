"""
pytest 공통 fixture 정의
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성"""
    secrets_content = """# 테스트용 secrets.yaml
backpack:
  public_key: "dGVzdF9wdWJsaWNfa2V5X2Jhc2U2NF9hYmNkZWZnaA=="
  private_key: "AAECAwQFBgcICQoLDA0ODxAREhMUFRYXGBkaGxwdHh8="
  window_ms: 10000
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_minimal(temp_dir: Path) -> Path:
    """window_ms/rest_url 없는 secrets.yaml 파일 생성"""
    secrets_content = """backpack:
  public_key: "pub"
  private_key: "priv"
"""
    secrets_path = temp_dir / "secrets_minimal.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_invalid_window(temp_dir: Path) -> Path:
    """잘못된 window_ms의 secrets.yaml 파일 생성"""
    secrets_content = """backpack:
  public_key: "pub"
  private_key: "priv"
  window_ms: "soon"
"""
    secrets_path = temp_dir / "secrets_invalid.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path
