"""Source-of-truth alias pairs for the localized dialect.

Each table is an ordered list of ``(localized, canonical)`` pairs. Forward
lookups are built from every pair; reverse lookups keep the first pair
registered for a canonical token, so the order below decides which localized
spelling the generator writes.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------

ELEMENT_ALIASES: list[tuple[str, str]] = [
    # messages
    ("用户消息", '.mes[is_user="true"] .mes_block'),
    ("角色消息", '.mes:not([is_user="true"]) .mes_block'),
    ("AI消息", '.mes[is_user="false"] .mes_block'),
    ("消息文本", ".mes_text"),
    ("角色名称", ".ch_name"),
    ("头像", ".avatar img"),
    ("时间戳", ".timestamp"),
    # input
    ("输入框", "#send_textarea"),
    ("发送按钮", "#send_but"),
    ("输入区域", "#send_form"),
    ("停止按钮", "#stop_generate"),
    # page layout
    ("聊天区域", "#chat"),
    ("顶部栏", "#top-bar"),
    ("侧边栏", ".drawer-content"),
    ("页面背景", "body"),
    # controls
    ("通用按钮", ".menu_button"),
    ("滑动按钮", ".swipe_left, .swipe_right"),
    ("弹窗", ".popup"),
    ("滚动条", "::-webkit-scrollbar"),
    ("滚动条滑块", "::-webkit-scrollbar-thumb"),
    # characters
    ("角色卡片", ".character_select"),
    ("角色标签", ".character_tag"),
    # world info
    ("世界书条目", ".world_entry"),
    ("条目标题", ".world_entry_title"),
    ("条目内容", ".world_entry_content"),
    # avatar anchors
    ("用户头像", '.mes[is_user="true"] .avatar'),
    ("角色头像", '.mes[is_user="false"] .avatar'),
    ("AI角色头像", '.mes[is_user="false"] .avatar'),
    # info anchors
    ("用户消息ID", '.mes[is_user="true"] .mesIDDisplay'),
    ("用户Token计数", '.mes[is_user="true"] .tokenCounterDisplay'),
    ("AI消息ID", '.mes[is_user="false"] .mesIDDisplay'),
    ("AI计时器", '.mes[is_user="false"] .mes_timer'),
    ("AIToken计数", '.mes[is_user="false"] .tokenCounterDisplay'),
    # icons
    ("AI响应配置", "#leftNavDrawerIcon"),
    ("角色管理图标", "#rightNavDrawerIcon"),
    ("扩展菜单图标", "#extensionsMenuIcon"),
    ("设置图标", "#settingsIcon"),
]

# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

PROPERTY_ALIASES: list[tuple[str, str]] = [
    # background and color
    ("背景颜色", "background-color"),
    ("背景", "background"),
    ("背景图片", "background-image"),
    ("背景大小", "background-size"),
    ("背景位置", "background-position"),
    ("背景重复", "background-repeat"),
    ("背景附着", "background-attachment"),
    ("文字颜色", "color"),
    ("透明度", "opacity"),
    # avatar layout intent
    ("布局模式", "avatar-layout-mode"),
    ("头像位置", "avatar-position"),
    ("水平偏移", "avatar-offset-x"),
    ("垂直偏移", "avatar-offset-y"),
    ("旋转角度", "avatar-rotate"),
    # info layout intent
    ("信息布局模式", "info-layout-mode"),
    ("信息位置", "info-position"),
    ("信息水平偏移", "info-offset-x"),
    ("信息垂直偏移", "info-offset-y"),
    ("信息旋转角度", "info-rotate"),
    ("排列方向", "info-direction"),
    # border
    ("边框", "border"),
    ("圆角", "border-radius"),
    ("边框颜色", "border-color"),
    ("边框宽度", "border-width"),
    ("边框样式", "border-style"),
    # spacing
    ("内边距", "padding"),
    ("外边距", "margin"),
    ("上边距", "margin-top"),
    ("下边距", "margin-bottom"),
    ("左边距", "margin-left"),
    ("右边距", "margin-right"),
    ("上内边距", "padding-top"),
    ("下内边距", "padding-bottom"),
    ("左内边距", "padding-left"),
    ("右内边距", "padding-right"),
    # text
    ("字体大小", "font-size"),
    ("字体", "font-family"),
    ("字体粗细", "font-weight"),
    ("行高", "line-height"),
    ("字间距", "letter-spacing"),
    ("文字对齐", "text-align"),
    ("文字装饰", "text-decoration"),
    ("文字变换", "text-transform"),
    # size
    ("宽度", "width"),
    ("高度", "height"),
    ("最大宽度", "max-width"),
    ("最小宽度", "min-width"),
    ("最大高度", "max-height"),
    ("最小高度", "min-height"),
    # shadows
    ("阴影", "box-shadow"),
    ("文字阴影", "text-shadow"),
    ("启用阴影", "shadow-enabled"),
    # filters and motion
    ("滤镜", "filter"),
    ("模糊效果", "backdrop-filter"),
    ("过渡效果", "transition"),
    ("过渡", "transition"),
    ("动画", "animation"),
    ("变换", "transform"),
    # layout
    ("显示方式", "display"),
    ("定位", "position"),
    ("位置", "position"),
    ("层级", "z-index"),
    ("浮动", "float"),
    ("溢出", "overflow"),
    ("溢出水平", "overflow-x"),
    ("溢出垂直", "overflow-y"),
    ("顶部", "top"),
    ("底部", "bottom"),
    ("左边", "left"),
    ("右边", "right"),
    ("上", "top"),
    ("下", "bottom"),
    ("左", "left"),
    ("右", "right"),
    # flexbox
    ("弹性方向", "flex-direction"),
    ("弹性换行", "flex-wrap"),
    ("弹性流", "flex-flow"),
    ("主轴对齐", "justify-content"),
    ("交叉轴对齐", "align-items"),
    ("内容对齐", "align-content"),
    ("弹性增长", "flex-grow"),
    ("弹性收缩", "flex-shrink"),
    ("弹性基础", "flex-basis"),
    ("弹性", "flex"),
    ("自身对齐", "align-self"),
    ("顺序", "order"),
    ("间距", "gap"),
    ("行间距", "row-gap"),
    ("列间距", "column-gap"),
    # grid
    ("网格模板列", "grid-template-columns"),
    ("网格模板行", "grid-template-rows"),
    ("网格模板区域", "grid-template-areas"),
    ("网格模板", "grid-template"),
    ("网格列间距", "column-gap"),
    ("网格行间距", "row-gap"),
    ("网格间距", "gap"),
    ("网格列开始", "grid-column-start"),
    ("网格列结束", "grid-column-end"),
    ("网格列", "grid-column"),
    ("网格行开始", "grid-row-start"),
    ("网格行结束", "grid-row-end"),
    ("网格行", "grid-row"),
    ("网格区域", "grid-area"),
    ("网格自动列", "grid-auto-columns"),
    ("网格自动行", "grid-auto-rows"),
    ("网格自动流", "grid-auto-flow"),
    # transform
    ("变换原点", "transform-origin"),
    ("变换风格", "transform-style"),
    ("透视", "perspective"),
    ("透视原点", "perspective-origin"),
    ("背面可见", "backface-visibility"),
    # animation
    ("动画名称", "animation-name"),
    ("动画持续时间", "animation-duration"),
    ("动画时间函数", "animation-timing-function"),
    ("动画延迟", "animation-delay"),
    ("动画次数", "animation-iteration-count"),
    ("动画方向", "animation-direction"),
    ("动画填充模式", "animation-fill-mode"),
    ("动画播放状态", "animation-play-state"),
    # transition
    ("过渡属性", "transition-property"),
    ("过渡持续时间", "transition-duration"),
    ("过渡时间函数", "transition-timing-function"),
    ("过渡延迟", "transition-delay"),
    # blending and clipping
    ("混合模式", "mix-blend-mode"),
    ("背景混合模式", "background-blend-mode"),
    ("裁剪路径", "clip-path"),
    ("裁剪", "clip"),
    ("蒙版", "mask"),
    ("蒙版图片", "mask-image"),
    ("蒙版大小", "mask-size"),
    ("蒙版位置", "mask-position"),
    ("蒙版重复", "mask-repeat"),
    # scrolling
    ("滚动行为", "scroll-behavior"),
    ("滚动捕捉类型", "scroll-snap-type"),
    ("滚动捕捉对齐", "scroll-snap-align"),
    ("滚动边距", "scroll-margin"),
    ("滚动内边距", "scroll-padding"),
    # shapes
    ("形状外部", "shape-outside"),
    ("形状边距", "shape-margin"),
    ("形状图片阈值", "shape-image-threshold"),
    # interaction
    ("指针事件", "pointer-events"),
    ("触摸动作", "touch-action"),
    ("鼠标样式", "cursor"),
    ("用户选择", "user-select"),
    # text extras
    ("文本溢出", "text-overflow"),
    ("单词换行", "word-wrap"),
    ("单词断行", "word-break"),
    ("连字符", "hyphens"),
    ("文本方向", "writing-mode"),
    # tables and lists
    ("表格布局", "table-layout"),
    ("边框合并", "border-collapse"),
    ("边框间距", "border-spacing"),
    ("空单元格", "empty-cells"),
    ("标题位置", "caption-side"),
    ("列表样式", "list-style"),
    ("列表样式类型", "list-style-type"),
    ("列表样式位置", "list-style-position"),
    ("列表样式图片", "list-style-image"),
    # decoration control
    ("是否超出父元素显示", "decoration-overflow-mode"),
    ("超出父元素", "decoration-overflow-mode"),
    # generated content and paging
    ("内容", "content"),
    ("计数器重置", "counter-reset"),
    ("计数器增量", "counter-increment"),
    ("引用", "quotes"),
    ("孤行控制", "orphans"),
    ("寡行控制", "widows"),
    ("分页前", "page-break-before"),
    ("分页后", "page-break-after"),
    ("分页内", "page-break-inside"),
]

# ---------------------------------------------------------------------------
# Keywords (apply to every property)
# ---------------------------------------------------------------------------

KEYWORD_ALIASES: list[tuple[str, str]] = [
    ("透明", "transparent"),
    ("无", "none"),
    ("包含", "contain"),
    ("覆盖", "cover"),
    ("自动", "auto"),
    # position values
    ("相对定位", "relative"),
    ("绝对定位", "absolute"),
    ("固定定位", "fixed"),
    ("粘性定位", "sticky"),
    ("静态定位", "static"),
    # display values
    ("块级", "block"),
    ("行内", "inline"),
    ("行内块", "inline-block"),
    ("弹性盒", "flex"),
    ("网格", "grid"),
    ("表格", "table"),
    ("表格行", "table-row"),
    ("表格单元格", "table-cell"),
    # visibility
    ("隐藏", "hidden"),
    ("可见", "visible"),
    ("滚动", "scroll"),
    # switches
    ("启用", "enabled"),
    ("禁用", "disabled"),
    # presets with awkward canonical syntax
    ("毛玻璃", "blur(8px)"),
    ("快速过渡", "all 0.2s ease"),
    ("标准过渡", "all 0.3s ease"),
    ("慢速过渡", "all 0.5s ease"),
]

# ---------------------------------------------------------------------------
# Property-scoped keywords (consulted before the global keyword table)
# ---------------------------------------------------------------------------

_LAYOUT_MODES: list[tuple[str, str]] = [
    ("无", "none"),
    ("无布局", "none"),
    ("保持原位置", "none"),
    ("挤压文字模式", "squeeze"),
    ("挤压模式", "squeeze"),
    ("影响布局", "squeeze"),
    ("悬浮模式", "overlay"),
    ("覆盖模式", "overlay"),
    ("覆盖在上层", "overlay"),
]

_ANCHOR_POSITIONS: list[tuple[str, str]] = [
    ("顶部左", "top-left"),
    ("顶部中", "top-center"),
    ("顶部右", "top-right"),
    ("左边上", "left-top"),
    ("左边中", "left-middle"),
    ("左边下", "left-bottom"),
    ("右边上", "right-top"),
    ("右边中", "right-middle"),
    ("右边下", "right-bottom"),
    ("底部左", "bottom-left"),
    ("底部中", "bottom-center"),
    ("底部右", "bottom-right"),
    # short forms
    ("顶左", "top-left"),
    ("顶中", "top-center"),
    ("顶右", "top-right"),
    ("左上", "left-top"),
    ("左中", "left-middle"),
    ("左下", "left-bottom"),
    ("右上", "right-top"),
    ("右中", "right-middle"),
    ("右下", "right-bottom"),
    ("底左", "bottom-left"),
    ("底中", "bottom-center"),
    ("底右", "bottom-right"),
]

SCOPED_KEYWORD_ALIASES: dict[str, list[tuple[str, str]]] = {
    "avatar-layout-mode": _LAYOUT_MODES,
    "info-layout-mode": _LAYOUT_MODES,
    "avatar-position": _ANCHOR_POSITIONS,
    "info-position": _ANCHOR_POSITIONS,
    "info-direction": [
        ("竖列", "column"),
        ("上下排列", "column"),
        ("垂直排列", "column"),
        ("横列", "row"),
        ("左右排列", "row"),
        ("水平排列", "row"),
    ],
    "position": [
        ("绝对", "absolute"),
        ("相对", "relative"),
        ("固定", "fixed"),
        ("静态", "static"),
        ("粘性", "sticky"),
    ],
    "background-repeat": [
        ("重复", "repeat"),
        ("不重复", "no-repeat"),
        ("横向重复", "repeat-x"),
        ("纵向重复", "repeat-y"),
        ("重复横向", "repeat-x"),
        ("重复纵向", "repeat-y"),
        ("空间", "space"),
        ("圆形", "round"),
    ],
    "background-size": [
        ("包含", "contain"),
        ("覆盖", "cover"),
        ("自动", "auto"),
        ("原始", "auto"),
    ],
    "background-position": [
        ("居中", "center"),
        ("中心", "center"),
        ("左侧", "left"),
        ("右侧", "right"),
        ("顶部", "top"),
        ("底部", "bottom"),
        ("左上", "left top"),
        ("右上", "right top"),
        ("左下", "left bottom"),
        ("右下", "right bottom"),
        ("中上", "center top"),
        ("中下", "center bottom"),
        ("左中", "left center"),
        ("右中", "right center"),
    ],
    "background-attachment": [
        ("固定", "fixed"),
        ("滚动", "scroll"),
        ("本地", "local"),
    ],
    "pointer-events": [
        ("无", "none"),
        ("自动", "auto"),
        ("禁用", "none"),
        ("启用", "auto"),
    ],
    "decoration-overflow-mode": [
        ("超出", "allow-overflow"),
        ("允许超出", "allow-overflow"),
        ("是", "allow-overflow"),
        ("不超出", "contain"),
        ("限制", "contain"),
        ("否", "contain"),
    ],
    "content": [
        ("空", "''"),
        ("无", "''"),
    ],
}

# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

UNIT_ALIASES: list[tuple[str, str]] = [
    # length
    ("像素", "px"),
    ("字高", "em"),
    ("根字高", "rem"),
    ("字符宽", "ch"),
    ("字符高", "ex"),
    ("英寸", "in"),
    ("厘米", "cm"),
    ("毫米", "mm"),
    ("点", "pt"),
    ("派卡", "pc"),
    # viewport
    ("视口宽", "vw"),
    ("视口高", "vh"),
    ("视口最小", "vmin"),
    ("视口最大", "vmax"),
    # relative
    ("百分比", "%"),
    ("分数", "fr"),
    # angle
    ("度", "deg"),
    ("弧度", "rad"),
    ("梯度", "grad"),
    ("圈", "turn"),
    # time
    ("秒", "s"),
    ("毫秒", "ms"),
    # frequency
    ("赫兹", "Hz"),
    ("千赫兹", "kHz"),
    # resolution
    ("每英寸点数", "dpi"),
    ("每厘米点数", "dpcm"),
    ("每像素点数", "dppx"),
]

# Suffixes accepted on input but never written back: they have no distinct
# canonical unit to format from.
FORWARD_ONLY_UNITS: list[tuple[str, str]] = [
    ("倍", ""),
    ("百分号", "%"),
]

# ---------------------------------------------------------------------------
# Functions
# ---------------------------------------------------------------------------

FUNCTION_ALIASES: list[tuple[str, str]] = [
    # transform
    ("缩放", "scale"),
    ("旋转", "rotate"),
    ("移动", "translate"),
    ("偏移", "translate"),
    ("倾斜", "skew"),
    ("矩阵", "matrix"),
    # filter
    ("模糊", "blur"),
    ("投影", "drop-shadow"),
    ("亮度", "brightness"),
    ("对比度", "contrast"),
    ("饱和度", "saturate"),
    ("色相", "hue-rotate"),
    ("色相旋转", "hue-rotate"),
    ("灰度", "grayscale"),
    ("反转", "invert"),
    ("褐色", "sepia"),
    ("透明度", "opacity"),
    # gradients
    ("渐变", "linear-gradient"),
    ("线性渐变", "linear-gradient"),
    ("径向渐变", "radial-gradient"),
    ("圆锥渐变", "conic-gradient"),
    # math and variables
    ("计算", "calc"),
    ("最小值", "min"),
    ("最大值", "max"),
    ("夹值", "clamp"),
    ("变量", "var"),
]

# Separator between the two stops of a localized gradient: 渐变(红 到 蓝)
GRADIENT_STOP_SEPARATOR = " 到 "
