"""
Fuzz Testing for the Deployment Runner
Random configurations, environments and failures
"""

import asyncio
import os

from hypothesis import given, settings, strategies as st
from unittest.mock import Mock, AsyncMock, patch

from blockchain import DeployedContract
from scripts.deploy_contract import DeploymentConfig, main, run


def make_manager(deploy_side_effect=None):
    """Build a mocked manager and factory pair"""
    factory = Mock()
    factory.deploy = AsyncMock(
        return_value=DeployedContract("SixElements", "0x" + "ab" * 20, "0x" + "00" * 32, None),
        side_effect=deploy_side_effect
    )
    manager = Mock()
    manager.get_contract_factory = AsyncMock(return_value=factory)
    return manager, factory


class TestArgumentFidelityFuzzing:
    """Constructor arguments reach deploy untouched"""

    @given(args=st.lists(st.text(), max_size=5).map(tuple))
    def test_args_passed_through(self, args):
        manager, factory = make_manager()
        config = DeploymentConfig(constructor_args=args)

        asyncio.run(run(config, manager))

        factory.deploy.assert_awaited_once_with(*args)

    @given(env=st.dictionaries(
        st.sampled_from(["RPC_URL", "DEPLOYER_PRIVATE_KEY", "ARTIFACTS_DIR", "CONTRACT_NAME"]),
        st.text(alphabet=st.characters(blacklist_categories=("Cs", "Cc")), max_size=40)
    ))
    def test_default_config_ignores_environment(self, env):
        manager, factory = make_manager()

        with patch.dict(os.environ, env):
            asyncio.run(run(contract_manager=manager))

        manager.get_contract_factory.assert_awaited_once_with("SixElements")
        factory.deploy.assert_awaited_once_with("0x44F3747017Cc79a0D55914C20bf6666194359CD7")


class TestExitCodeFuzzing:
    """Exit code is always 0 or 1"""

    @settings(max_examples=30)
    @given(
        error_type=st.sampled_from([
            Exception, ValueError, TypeError, RuntimeError,
            ConnectionError, TimeoutError, OSError, KeyError
        ]),
        message=st.text(max_size=50)
    )
    def test_failures_exit_one(self, error_type, message):
        manager, factory = make_manager(deploy_side_effect=error_type(message))

        with patch("scripts.deploy_contract.build_contract_manager", return_value=manager):
            code = main()

        assert code == 1
        assert factory.deploy.await_count == 1

    @settings(max_examples=10)
    @given(address=st.from_regex(r"0x[0-9a-fA-F]{40}", fullmatch=True))
    def test_success_exits_zero(self, address):
        manager, factory = make_manager()
        factory.deploy.return_value = DeployedContract("SixElements", address, "0x" + "00" * 32, None)

        with patch("scripts.deploy_contract.build_contract_manager", return_value=manager):
            assert main() == 0
