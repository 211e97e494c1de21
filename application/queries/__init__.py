"""查询定义"""
