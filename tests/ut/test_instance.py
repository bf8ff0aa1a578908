"""测试 instance 实例计数"""
import copy
import io
import threading

import pytest

from simplecheck import instance
from simplecheck.instance import InstanceCounter, InstanceCounters, track, tracked_types


@pytest.fixture(autouse=True)
def exit_reports(monkeypatch):
    """收集 atexit 报告而不真正注册，测试结束时不输出计数报告"""
    registered = []
    monkeypatch.setattr(instance.atexit, "register", registered.append)
    return registered


class TestInstanceCounter:
    """InstanceCounter mixin"""

    def test_create_and_destroy(self):
        """创建 3 个，销毁 1 个: 存活 2，累计 3，带 NOT zero 标记"""
        class Widget(InstanceCounter):
            pass

        widgets = [Widget() for _ in range(3)]
        del widgets[0]

        counters = Widget.instance_counter()
        assert counters.live == 2
        assert counters.total == 3

        lines = counters.report_lines()
        assert "Widget" in lines[0]
        assert lines[0].endswith("at the end of the program is 2 (NOT zero!)")
        assert lines[1] == "The total number of objects created was 3"

    def test_all_destroyed(self):
        class Gizmo(InstanceCounter):
            pass

        items = [Gizmo(), Gizmo()]
        items.clear()

        counters = Gizmo.instance_counter()
        assert counters.live == 0
        assert counters.total == 2
        assert counters.report_lines()[0].endswith("is 0")

    def test_init_arguments(self):
        """__init__ 参数不影响计数"""
        class Point(InstanceCounter):
            def __init__(self, x, y=0):
                self.x = x
                self.y = y

        p = Point(1, y=2)
        assert (p.x, p.y) == (1, 2)
        assert Point.instance_counter().total == 1

    def test_copies_are_new_instances(self):
        """copy / deepcopy 都计为新实例"""
        class Node(InstanceCounter):
            def __init__(self):
                self.children = []

        original = Node()
        shallow = copy.copy(original)
        deep = copy.deepcopy(original)

        counters = Node.instance_counter()
        assert counters.total == 3
        assert counters.live == 3
        del shallow, deep
        assert counters.live == 1
        assert original.children == []

    def test_subclass_counts_as_base(self):
        """子类计入直接继承 InstanceCounter 的类型"""
        class Base(InstanceCounter):
            pass

        class Derived(Base):
            pass

        keep = [Base(), Derived(), Derived()]
        assert Base.instance_counter() is Derived.instance_counter()
        assert Base.instance_counter().total == 3
        assert len(keep) == 3

    def test_types_are_independent(self):
        class Apple(InstanceCounter):
            pass

        class Pear(InstanceCounter):
            pass

        apples = [Apple() for _ in range(4)]
        pear = Pear()
        del apples[:3]

        assert (Apple.instance_counter().live, Apple.instance_counter().total) == (1, 4)
        assert (Pear.instance_counter().live, Pear.instance_counter().total) == (1, 1)
        assert pear is not None

    def test_concurrent_construction(self):
        class Item(InstanceCounter):
            pass

        def work():
            for _ in range(500):
                Item()

        threads = [threading.Thread(target=work) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        counters = Item.instance_counter()
        assert counters.total == 4000
        assert counters.live == 0


class TestTrack:
    """显式计数"""

    def test_same_counter_per_type(self, exit_reports):
        class Buffer:
            pass

        assert track(Buffer) is track(Buffer)
        assert Buffer in tracked_types()
        # 每个类型只注册一次退出报告
        assert exit_reports == [track(Buffer).print_report]

    def test_explicit_hooks(self):
        class Handle:
            pass

        counters = track(Handle)
        counters.increment()
        counters.increment()
        counters.decrement()
        assert counters.live == 1
        assert counters.total == 2

    def test_negative_count_reported_as_is(self):
        """多余的 decrement 使存活数为负，原样输出"""
        class Leaky:
            pass

        counters = track(Leaky)
        counters.decrement()
        assert counters.live == -1
        line = counters.report_lines()[0]
        assert line.endswith("is -1")
        assert "NOT zero" not in line


class TestReport:
    """退出报告"""

    def test_printed_once(self):
        class Thing:
            pass

        stream = io.StringIO()
        counters = InstanceCounters(Thing, stream=stream)
        counters.increment()

        assert counters.print_report() is True
        assert counters.print_report() is False
        assert stream.getvalue() == (
            "The remaining number of objects of type "
            f"{Thing.__qualname__} at the end of the program is 1 (NOT zero!)\n"
            "The total number of objects created was 1\n"
        )
