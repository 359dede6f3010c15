"""X-ray test case generator"""
