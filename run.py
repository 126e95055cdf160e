import sys

# mpin_checker.xxx でインポートするため、プロジェクトルートから実行すること

if __name__ == "__main__":
    try:
        from mpin_checker.main import main
    except ImportError as e:
        print(f"CRITICAL: Could not import mpin_checker.main: {e}")
        sys.exit(1)

    sys.exit(main())
