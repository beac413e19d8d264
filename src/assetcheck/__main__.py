"""assetcheckのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    from assetcheck.cli import main

    main()
