"""命令定义"""
