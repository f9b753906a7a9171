"""GameModule, ModuleManager 테스트"""

from src.core.event_bus import EventBus, GameEvent
from src.modules.base import GameModule
from src.modules.module_manager import ModuleManager


# --- 테스트용 모듈 ---


class AlphaModule(GameModule):
    def __init__(self):
        super().__init__()
        self.enable_called = False
        self.disable_called = False

    @property
    def name(self):
        return "alpha"

    def on_enable(self):
        self.enable_called = True

    def on_disable(self):
        self.disable_called = True


class BetaModule(GameModule):
    """alpha에 의존하는 모듈"""

    def __init__(self):
        super().__init__()
        self.enable_called = False
        self.disable_called = False

    @property
    def name(self):
        return "beta"

    @property
    def dependencies(self):
        return ["alpha"]

    def on_enable(self):
        self.enable_called = True

    def on_disable(self):
        self.disable_called = True


class GammaModule(GameModule):
    """beta에 의존 (alpha → beta → gamma 체인)"""

    def __init__(self):
        super().__init__()
        self.disable_called = False

    @property
    def name(self):
        return "gamma"

    @property
    def dependencies(self):
        return ["beta"]

    def on_enable(self):
        pass

    def on_disable(self):
        self.disable_called = True


class TestGameModule:
    def test_defaults(self):
        m = AlphaModule()
        assert m.name == "alpha"
        assert m.enabled is False
        assert m.dependencies == []

    def test_enable_disable_flag(self):
        m = AlphaModule()
        m.enabled = True
        assert m.enabled is True
        m.enabled = False
        assert m.enabled is False


class TestRegister:
    def test_register_module(self):
        mm = ModuleManager()
        mm.register(AlphaModule())
        assert "alpha" in mm.modules

    def test_register_overwrites(self):
        mm = ModuleManager()
        m1 = AlphaModule()
        m2 = AlphaModule()
        mm.register(m1)
        mm.register(m2)
        assert mm.modules["alpha"] is m2

    def test_shared_event_bus(self):
        bus = EventBus()
        assert ModuleManager(bus).event_bus is bus


class TestEnable:
    def test_enable_success(self):
        mm = ModuleManager()
        mm.register(AlphaModule())
        assert mm.enable("alpha") is True
        assert mm.is_enabled("alpha") is True

    def test_enable_calls_on_enable(self):
        mm = ModuleManager()
        m = AlphaModule()
        mm.register(m)
        mm.enable("alpha")
        assert m.enable_called is True

    def test_enable_nonexistent(self):
        mm = ModuleManager()
        assert mm.enable("nonexistent") is False

    def test_enable_already_enabled(self):
        mm = ModuleManager()
        mm.register(AlphaModule())
        mm.enable("alpha")
        assert mm.enable("alpha") is True  # 중복 활성화 OK

    def test_enable_with_dependency_met(self):
        mm = ModuleManager()
        mm.register(AlphaModule())
        mm.register(BetaModule())
        mm.enable("alpha")
        assert mm.enable("beta") is True

    def test_enable_with_dependency_not_met(self):
        mm = ModuleManager()
        b = BetaModule()
        mm.register(b)  # alpha 미등록
        assert mm.enable("beta") is False
        assert b.enable_called is False

    def test_enable_with_dependency_not_enabled(self):
        mm = ModuleManager()
        mm.register(AlphaModule())  # 등록만, 활성화 안 함
        mm.register(BetaModule())
        assert mm.enable("beta") is False

    def test_enable_all_in_registration_order(self):
        mm = ModuleManager()
        mm.register(AlphaModule())
        mm.register(BetaModule())
        mm.register(GammaModule())
        assert mm.enable_all() == []
        assert [m.name for m in mm.get_enabled_modules()] == ["alpha", "beta", "gamma"]

    def test_enable_all_reports_failures(self):
        mm = ModuleManager()
        mm.register(BetaModule())
        mm.register(AlphaModule())
        assert mm.enable_all() == ["beta"]


class TestDisable:
    def test_disable_success(self):
        mm = ModuleManager()
        m = AlphaModule()
        mm.register(m)
        mm.enable("alpha")
        assert mm.disable("alpha") is True
        assert mm.is_enabled("alpha") is False
        assert m.disable_called is True

    def test_disable_nonexistent(self):
        mm = ModuleManager()
        assert mm.disable("nonexistent") is False

    def test_disable_already_disabled(self):
        mm = ModuleManager()
        mm.register(AlphaModule())
        assert mm.disable("alpha") is True

    def test_cascade_disable(self):
        """alpha 비활성화 시 beta도 비활성화"""
        mm = ModuleManager()
        mm.register(AlphaModule())
        b = BetaModule()
        mm.register(b)
        mm.enable("alpha")
        mm.enable("beta")
        mm.disable("alpha")
        assert mm.is_enabled("alpha") is False
        assert mm.is_enabled("beta") is False
        assert b.disable_called is True

    def test_deep_cascade_disable(self):
        """alpha → beta → gamma 체인 cascade"""
        mm = ModuleManager()
        mm.register(AlphaModule())
        mm.register(BetaModule())
        g = GammaModule()
        mm.register(g)
        mm.enable_all()
        mm.disable("alpha")
        assert mm.is_enabled("gamma") is False
        assert g.disable_called is True


class TestDispatch:
    def test_dispatch_reaches_subscribers(self):
        mm = ModuleManager()
        received = []
        mm.event_bus.subscribe("block_destroyed", received.append)
        mm.dispatch(GameEvent(event_type="block_destroyed", data={}, source="host"))
        assert len(received) == 1
