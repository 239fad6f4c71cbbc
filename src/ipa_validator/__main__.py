"""ipa-validatorのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    from ipa_validator.cli import main

    raise SystemExit(main())
