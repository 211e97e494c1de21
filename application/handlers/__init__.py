"""命令/查询处理器"""
