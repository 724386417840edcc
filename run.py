"""PyInstaller entry point. To play normally use: python3 -m dungeon_robot"""
from dungeon_robot.__main__ import main
raise SystemExit(main())
