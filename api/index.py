"""Vercel serverless entry point for dialectcss."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from dialectcss.session import StyleSession
from dialectcss.web.app import create_app

# Seed a small theme so the demo isn't empty
DEMO_THEME = """\
# 消息样式
用户消息 {
  背景颜色: #336699
  圆角: 8像素
}

角色头像 {
  布局模式: 悬浮模式
  头像位置: 底部右
  宽度: 40像素
}

# 布局样式
聊天区域 {
  背景颜色: 透明
}
"""

session = StyleSession()
session.load(DEMO_THEME)

app = create_app(session=session)
