"""
Hypothesis settings for the property-based test suite.
"""
# 说明：属性测试的 Hypothesis 全局配置；策略定义见同目录的 strategies.py。
# 约定：
# - 关闭 deadline，避免在负载较高的 CI 机器上出现偶发超时
# - 通过环境变量 HYPOTHESIS_PROFILE 切换 "ci"（更多样例）与默认的 "posixopt" 配置

import os

from hypothesis import settings

settings.register_profile("posixopt", deadline=None, max_examples=200)
settings.register_profile("ci", deadline=None, max_examples=1000)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "posixopt"))
