"""对比实验"""
