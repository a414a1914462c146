"""Tests for the Grover search simulator core.

このファイルは Grover 探索シミュレータの中核部分をテストします。
以下の側面をカバーしています:

1. 反復回数の閉形式 round(π/4·√N)（下限 1、上限 N）
2. ターゲットの抽選と乱数源の注入
3. quantum_search の決定性と戻り値
4. 未初期化状態での振る舞い（センチネル None）
"""

import logging
import math

import numpy as np
import pytest

from grover_lab.config import SimulatorConfig
from grover_lab.core import (
    GroverSearchSimulator,
    SimulatorState,
    optimal_iterations,
)


def _sequence_source(values):
    """Return a random source that yields the given values in order."""
    it = iter(values)
    return lambda: next(it)


class TestOptimalIterations:
    """反復回数の計算式のテスト.

    単一の解を N 個の候補から探す場合、最適反復回数は
    約 (π/4)·√N です。古典探索の O(N) に対し O(√N) となります。
    """

    def test_known_values(self):
        """既知の N に対する反復回数.

        - N=1:  0.785 → 下限により 1
        - N=4:  1.571 → 2
        - N=8:  2.221 → 2
        - N=16: 3.142 → 3
        - N=64: 6.283 → 6
        """
        assert optimal_iterations(1) == 1
        assert optimal_iterations(4) == 2
        assert optimal_iterations(8) == 2
        assert optimal_iterations(16) == 3
        assert optimal_iterations(64) == 6
        assert optimal_iterations(256) == 13

    def test_demo_size_in_range(self):
        """N=8 では 1〜3 回の範囲に入る（UI 表示の「平均 2〜3 回」）."""
        assert 1 <= optimal_iterations(8) <= 3

    def test_never_exceeds_classical_worst_case(self):
        """反復回数は常に 1 以上 N 以下."""
        for n in range(1, 200):
            assert 1 <= optimal_iterations(n) <= n

    def test_scales_with_sqrt(self):
        """N に対して線形ではなく √N に比例して増加する.

        反復回数 / √N は π/4 付近に留まり、
        反復回数 / N は N とともに減少します。
        """
        sizes = [4, 16, 64, 256, 1024]
        attempts = [optimal_iterations(n) for n in sizes]

        assert attempts == sorted(attempts)
        for n, k in zip(sizes, attempts):
            assert k / math.sqrt(n) == pytest.approx(math.pi / 4, abs=0.25)

        linear_ratios = [k / n for n, k in zip(sizes, attempts)]
        assert linear_ratios == sorted(linear_ratios, reverse=True)
        assert attempts[-1] < sizes[-1] / 10

    @pytest.mark.parametrize("size", [0, -1, -8])
    def test_non_positive_size(self, size):
        """N <= 0 は ValueError."""
        with pytest.raises(ValueError):
            optimal_iterations(size)


class TestConstruction:
    """シミュレータの生成テスト."""

    def test_initial_state(self):
        """生成直後はターゲット未設定、量子試行回数は 0."""
        sim = GroverSearchSimulator(8)
        assert sim.size == 8
        assert len(sim.space) == 8
        assert sim.get_target() is None
        assert sim.quantum_attempts == 0
        assert sim.state is SimulatorState.UNINITIALIZED

    def test_numpy_integer_size(self):
        """numpy の整数型サイズも受け付け、int として保持する."""
        sim = GroverSearchSimulator(np.int64(8))
        assert sim.size == 8
        assert type(sim.size) is int

        sim.set_new_target()
        assert sim.quantum_search() == sim.get_target()
        assert sim.quantum_attempts == 2
        assert optimal_iterations(np.int32(64)) == 6

    @pytest.mark.parametrize("size", [0, -3, 2.5, "8", True])
    def test_invalid_size(self, size):
        """正の整数以外のサイズは生成時にエラー."""
        with pytest.raises(ValueError):
            GroverSearchSimulator(size)


class TestSetNewTarget:
    """ターゲット抽選のテスト.

    ターゲットは [0, N) から一様に選ばれ、
    前回のターゲットとは独立に抽選されます。
    """

    @pytest.mark.parametrize("size", [1, 2, 8, 13, 64])
    def test_target_in_range(self, size):
        """抽選されたターゲットは常に 0 <= target < N."""
        sim = GroverSearchSimulator(size, SimulatorConfig(seed=123))
        for _ in range(200):
            sim.set_new_target()
            assert 0 <= sim.get_target() < size
        assert sim.state is SimulatorState.TARGET_SET

    def test_injected_random_source(self):
        """注入した乱数源から floor(value·N) が選ばれる.

        0.999999 のように 1 に近い値でも N-1 に収まります。
        """
        source = _sequence_source([0.0, 0.5, 0.74, 0.999999])
        sim = GroverSearchSimulator(8, SimulatorConfig(random_source=source))

        targets = []
        for _ in range(4):
            sim.set_new_target()
            targets.append(sim.get_target())

        assert targets == [0, 4, 5, 7]

    def test_repeated_values_allowed(self):
        """連続するターゲットが同じ値でもよい（独立な抽選）."""
        sim = GroverSearchSimulator(8, SimulatorConfig(random_source=lambda: 0.3))
        sim.set_new_target()
        first = sim.get_target()
        sim.set_new_target()
        assert sim.get_target() == first == 2

    def test_seed_is_reproducible(self):
        """同じシードなら同じターゲット列になる."""
        a = GroverSearchSimulator(8, SimulatorConfig(seed=42))
        b = GroverSearchSimulator(8, SimulatorConfig(seed=42))

        seq_a, seq_b = [], []
        for _ in range(20):
            a.set_new_target()
            b.set_new_target()
            seq_a.append(a.get_target())
            seq_b.append(b.get_target())

        assert seq_a == seq_b

    def test_reset_clears_quantum_attempts(self):
        """再抽選で量子試行回数が 0 に戻る."""
        sim = GroverSearchSimulator(8, SimulatorConfig(seed=1))
        sim.set_new_target()
        sim.quantum_search()
        assert sim.quantum_attempts > 0

        sim.set_new_target()
        assert sim.quantum_attempts == 0

    @pytest.mark.parametrize("bad_value", [1.0, -0.1, 2.5])
    def test_bad_random_source_leaves_state_untouched(self, bad_value):
        """範囲外の乱数値はエラーとなり、状態は変更されない."""
        source = _sequence_source([0.25, bad_value])
        sim = GroverSearchSimulator(8, SimulatorConfig(random_source=source))
        sim.set_new_target()
        sim.quantum_search()

        with pytest.raises(ValueError):
            sim.set_new_target()

        assert sim.get_target() == 2
        assert sim.quantum_attempts == optimal_iterations(8)


class TestQuantumSearch:
    """量子探索（閉形式モデル）のテスト."""

    def test_returns_target(self):
        """戻り値は常に現在のターゲット."""
        sim = GroverSearchSimulator(8, SimulatorConfig(seed=7))
        for _ in range(50):
            sim.set_new_target()
            assert sim.quantum_search() == sim.get_target()

    def test_deterministic(self):
        """再抽選なしで2回呼んでも同じ試行回数."""
        sim = GroverSearchSimulator(8, SimulatorConfig(seed=3))
        sim.set_new_target()

        found_1 = sim.quantum_search()
        attempts_1 = sim.quantum_attempts
        found_2 = sim.quantum_search()
        attempts_2 = sim.quantum_attempts

        assert found_1 == found_2
        assert attempts_1 == attempts_2

    def test_demo_scenario(self):
        """N=8 のシナリオ: ターゲット取得 → 量子探索で同じ値、試行 1〜3 回."""
        sim = GroverSearchSimulator(8)
        sim.set_new_target()
        target = sim.get_target()

        assert isinstance(target, int)
        assert 0 <= target < 8
        assert sim.quantum_search() == target
        assert 1 <= sim.quantum_attempts <= 3

    def test_single_item_space(self):
        """N=1 でも試行回数は 1 以上（0 にはならない）."""
        sim = GroverSearchSimulator(1)
        sim.set_new_target()
        assert sim.quantum_search() == 0
        assert sim.quantum_attempts == 1

    def test_before_target_is_noop(self, caplog):
        """ターゲット未設定での呼び出しは None を返し、状態を変えない.

        UI の呼び出し順序の誤りは回復可能なため、例外ではなく
        警告ログを出力します。
        """
        sim = GroverSearchSimulator(8)

        with caplog.at_level(logging.WARNING, logger="grover_lab.core"):
            assert sim.quantum_search() is None

        assert sim.quantum_attempts == 0
        assert sim.get_target() is None
        assert "before set_new_target" in caplog.text


class TestRun:
    """古典・量子の比較実行のテスト."""

    def test_comparison(self):
        """古典試行回数は target+1、量子試行回数は閉形式の値."""
        sim = GroverSearchSimulator(16, SimulatorConfig(random_source=lambda: 0.9))
        sim.set_new_target()

        result = sim.run()

        assert result.target == 14
        assert result.classical_attempts == 15
        assert result.quantum_attempts == 3
        assert result.speedup == pytest.approx(5.0)
        assert sim.quantum_attempts == 3

    def test_requires_target(self):
        """ターゲット未設定では RuntimeError."""
        with pytest.raises(RuntimeError):
            GroverSearchSimulator(8).run()
