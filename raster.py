class InvalidArgumentError(ValueError):
    """光栅化或渲染配置收到非法参数（负尺寸、非整数、矩形角点顺序错误）"""


def _require_dimension(name: str, value) -> int:
    # bool 是 int 的子类，这里显式排除
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} 必须是整数，实际为 {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{name} 不能为负数，实际为 {value}")
    return value


# 圆的 8 个对称变换，顺序与八分圆展开一致
CIRCLE_SYMMETRY = (
    lambda x, y: (x, y),
    lambda x, y: (y, x),
    lambda x, y: (y, -x),
    lambda x, y: (x, -y),
    lambda x, y: (-x, -y),
    lambda x, y: (-y, -x),
    lambda x, y: (-y, x),
    lambda x, y: (-x, y),
)


def _expand(points, transforms) -> set:
    """把一组点经过每个对称变换后合并为一个集合（对称轴上的重复点自动去重）"""
    return {transform(x, y) for transform in transforms for (x, y) in points}


class TileRasterization:
    """网格瓦片的光栅化算法：中点圆（八分对称）与矩形约束的 Bresenham 椭圆（四象限对称）"""

    @staticmethod
    def midpoint_octet(radius: int) -> list:
        """中点圆算法 - 只计算一个八分圆，整数运算

        从 (0, r) 开始，x 每步加一；d < 0 时 y 不变（快步），否则 y 减一（慢步）。
        返回的点按 x 递增排列，且都满足 0 <= x <= y <= r。
        """
        _require_dimension("radius", radius)

        d = 1 - radius
        x = 0
        y = radius
        octet = [(x, y)]

        while x < y:
            x += 1
            if d < 0:
                d += 2 * x + 1
            else:
                y -= 1
                d += 2 * (x - y) + 1
            if x <= y:
                octet.append((x, y))

        return octet

    @staticmethod
    def midpoint_circle(radius: int) -> set:
        """以原点为圆心、给定半径的整圆，由八分圆经 8 对称展开得到"""
        octet = TileRasterization.midpoint_octet(radius)
        return _expand(octet, CIRCLE_SYMMETRY)

    @staticmethod
    def circle_plan(octet_ys) -> list:
        """八分圆每一行的瓦片数

        只传入 midpoint_octet() 返回点的 y 值，按顺序统计连续相同 y 的个数。
        例如半径 6 得到 [3, 1, 1]：

            xxx
               x
                x

        结果包含 [0, radius] 处和 x == y 处（若存在）的瓦片。
        """
        plan = []
        count = 0
        previous = None

        for y in octet_ys:
            if count and y == previous:
                count += 1
            else:
                if count:
                    plan.append(count)
                count = 1
            previous = y

        # 循环结束后补上最后一段
        if count:
            plan.append(count)

        return plan

    @staticmethod
    def bresenham_ellipse(x0: int, y0: int, x1: int, y1: int) -> list:
        """矩形约束的 Bresenham 椭圆

        (x0, y0): 矩形左下角，(x1, y1): 矩形右上角，要求 x0 < x1 且 y0 < y1。
        每一步同时输出四个象限的对称点，返回 [(x, y), ...]。
        """
        for name, value in (("x0", x0), ("y0", y0), ("x1", x1), ("y1", y1)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(f"{name} 必须是整数，实际为 {value!r}")
        if x0 >= x1 or y0 >= y1:
            raise InvalidArgumentError(
                f"矩形角点顺序错误: ({x0}, {y0}) -> ({x1}, {y1})，需要 x0 < x1 且 y0 < y1"
            )
        return TileRasterization._ellipse_points(x0, y0, x1, y1)

    @staticmethod
    def ellipse(height: int, width: int) -> set:
        """内切于 (0, 0)-(width, height) 矩形的椭圆，宽或高为 0 时退化为点或线"""
        _require_dimension("height", height)
        _require_dimension("width", width)
        return set(TileRasterization._ellipse_points(0, 0, width, height))

    @staticmethod
    def _ellipse_points(x0, y0, x1, y1):
        a = abs(x1 - x0)
        b = abs(y1 - y0)
        b1 = b & 1  # 奇数高度修正

        # x、y 两个方向的误差增量，以及合并误差
        dx = 4 * (1 - a) * b * b
        dy = 4 * (b1 + 1) * a * a
        err = dx + dy + b1 * a * a

        # y0 移到竖直中线，y1 与之对称
        y0 += (b + 1) // 2
        y1 = y0 - b1
        a *= 8 * a
        b1 = 8 * b * b

        points = []
        while True:
            points.extend([(x1, y0), (x0, y0), (x0, y1), (x1, y1)])
            e2 = 2 * err
            if e2 <= dy:
                y0 += 1
                y1 -= 1
                dy += a
                err += dy
            if e2 >= dx or 2 * err > dy:
                x0 += 1
                x1 -= 1
                dx += b1
                err += dx
            if x0 > x1:
                break

        # 扁平椭圆过早结束时补齐上下两端
        while y0 - y1 < b:
            points.append((x0 - 1, y0))
            points.append((x1 + 1, y0))
            y0 += 1
            points.append((x0 - 1, y1))
            points.append((x1 + 1, y1))
            y1 -= 1

        return points
