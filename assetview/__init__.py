"""assetview：基于资产原始路径的虚拟目录视图服务。"""
