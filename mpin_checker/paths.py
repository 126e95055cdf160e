import sys
import os

# resources フォルダの場所を明示する環境変数 (wheel インストール時など)
RESOURCES_ENV = "MPIN_CHECKER_RESOURCES"


def get_resource_dir():
    """
    resources フォルダの絶対パスを返す。

    優先順位:
        1. 環境変数 MPIN_CHECKER_RESOURCES
        2. PyInstaller でビルドしたEXEと同じ階層の resources/
        3. 開発環境のプロジェクトルート直下の resources/
    """
    override = os.environ.get(RESOURCES_ENV)
    if override:
        return os.path.abspath(os.path.expanduser(override))

    if getattr(sys, 'frozen', False):
        return os.path.join(os.path.dirname(sys.executable), "resources")

    # 構成: project_root/mpin_checker/paths.py
    package_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(os.path.dirname(package_dir), "resources")


def get_resource_path(relative_path):
    """
    リソースファイルの絶対パスを取得する。

    Args:
        relative_path (str): resourcesフォルダからの相対パス (例: "config/mpin_config.yml")
    """
    return os.path.abspath(os.path.join(get_resource_dir(), relative_path))
