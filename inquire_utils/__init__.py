"""inquire 共享工具：日志配置、惰性导入、同步/异步桥接。"""
