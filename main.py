#!/usr/bin/env python3
"""
stockwatch - 终端自选股行情
命令行启动脚本
"""

from stockwatch.cli import app

if __name__ == "__main__":
    app()
