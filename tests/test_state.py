"""Tests for Hero and its states."""

from patternplay import CommonState, Hero, HyperState, SuperState


def state_names(hero, shots):
    names = [type(hero.state).__name__]
    for _ in range(shots):
        hero.shoot()
        names.append(type(hero.state).__name__)
    return names


class TestTransitions:
    def test_starts_common(self):
        hero = Hero()
        assert isinstance(hero.state, CommonState)
        assert hero.shoot_counter == 0

    def test_nine_shot_script(self, capsys):
        hero = Hero()
        damages = [hero.shoot() for _ in range(9)]
        assert damages == [5, 5, 5, 10, 15, 5, 10, 15, 5]
        out = capsys.readouterr().out.splitlines()
        assert out == [f"Hero do damage: {d}" for d in damages]

    def test_state_sequence(self):
        assert state_names(Hero(), 9) == [
            "CommonState",
            "CommonState",
            "CommonState",
            "SuperState",
            "HyperState",
            "CommonState",
            "SuperState",
            "HyperState",
            "CommonState",
            "SuperState",
        ]

    def test_super_after_three_hyper_after_four_common_after_five(self):
        hero = Hero()
        for _ in range(3):
            hero.shoot()
        assert isinstance(hero.state, SuperState)
        hero.shoot()
        assert isinstance(hero.state, HyperState)
        hero.shoot()
        assert isinstance(hero.state, CommonState)

    def test_cycles_from_any_start(self):
        # No terminal state: Super -> Hyper -> Common, then Common waits for counter % 3 == 0.
        cases = [
            (CommonState(), [5, 5, 5, 10, 15, 5, 10, 15, 5]),
            (SuperState(), [10, 15, 5, 10, 15, 5, 10, 15, 5]),
            (HyperState(), [15, 5, 5, 10, 15, 5, 10, 15, 5]),
        ]
        for start, expected in cases:
            hero = Hero(start)
            assert [hero.shoot() for _ in range(9)] == expected

    def test_counter_is_monotonic(self):
        hero = Hero()
        for expected in range(1, 31):
            hero.shoot()
            assert hero.shoot_counter == expected


class TestStates:
    def test_common_stays_unless_multiple_of_three(self):
        hero = Hero()
        assert CommonState().do_damage(hero, 1) == 5
        assert isinstance(hero.state, CommonState)
        assert CommonState().do_damage(hero, 6) == 5
        assert isinstance(hero.state, SuperState)

    def test_super_and_hyper_unconditional(self):
        hero = Hero()
        assert SuperState().do_damage(hero, 1) == 10
        assert isinstance(hero.state, HyperState)
        assert HyperState().do_damage(hero, 1) == 15
        assert isinstance(hero.state, CommonState)

    def test_transition_to(self):
        hero = Hero()
        hero.transition_to(HyperState())
        assert hero.shoot() == 15
        assert repr(hero) == "Hero(CommonState(), shots=1)"
