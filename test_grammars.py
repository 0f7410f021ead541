#!/usr/bin/env python3
import pytest

from grammars import (
    ALGAE,
    ANABAENA,
    GRAMMARS,
    KOCH,
    PARAMETRIC,
    PENROSE,
    SEAWEED,
    SIERPINSKI,
    A,
    Algae,
    Anabaena,
    B,
    C,
    Penrose,
    Sierpinski,
)
from turtle_commands import Dummy, to_commands, trace


class TestAlgae:
    def test_generations(self) -> None:
        ex = GRAMMARS["algae"]
        gens = [ex.render(g) for g in ALGAE.generations(8)]
        assert gens[:5] == ["B", "A", "AB", "ABA", "ABAAB"]
        assert gens[6] == "ABAABABAABAAB"
        assert len(gens[7]) == 21

    def test_fourth_generation(self) -> None:
        assert ALGAE.generation(4) == [Algae.A, Algae.B, Algae.A, Algae.A, Algae.B]


class TestAnabaena:
    def test_fourth_generation(self) -> None:
        ar, al, br, bl = Anabaena.AR, Anabaena.AL, Anabaena.BR, Anabaena.BL
        assert ANABAENA.generation(3) == [al, al, br, al, br]
        assert ANABAENA.generation(4) == [bl, ar, bl, ar, ar, bl, ar, ar]

    def test_lengths_are_fibonacci(self) -> None:
        lengths = [len(g) for g in ANABAENA.generations(8)]
        assert lengths == [1, 2, 3, 5, 8, 13, 21, 34]

    def test_render(self) -> None:
        ex = GRAMMARS["anabaena"]
        assert ex.render(ANABAENA.generation(1)) == "<-- ->"


class TestFractals:
    def test_koch_lengths(self) -> None:
        assert [len(g) for g in KOCH.generations(3)] == [1, 9, 49]

    def test_koch_render(self) -> None:
        assert GRAMMARS["koch"].render(KOCH.generation(1)) == "F+F-F-F+F"

    def test_koch_trace(self) -> None:
        cmds = to_commands(KOCH.generation(1), GRAMMARS["koch"].commands or {})
        polylines = trace(cmds)
        assert len(polylines) == 1
        end = polylines[0][-1]
        assert end[0] == pytest.approx(0, abs=1e-9)
        assert end[1] == pytest.approx(30)

    def test_sierpinski(self) -> None:
        s = Sierpinski
        assert SIERPINSKI.generation(1) == [s.B, s.MINUS, s.A, s.MINUS, s.B]
        assert GRAMMARS["sierpinski"].render(SIERPINSKI.generation(2)) == (
            "A+B+A-B-A-B-A+B+A"
        )

    def test_seaweed(self) -> None:
        ex = GRAMMARS["seaweed"]
        assert ex.render(SEAWEED.generation(1)) == "FF-[-F+F+F]+[+F-F-F]"
        gen = SEAWEED.generation(3)
        polylines = trace(to_commands(gen, ex.commands or {}))
        assert len(polylines) > 1

    def test_penrose(self) -> None:
        ex = GRAMMARS["penrose"]
        assert ex.render(PENROSE.generation(0)) == "[N]++[N]++[N]++[N]++[N]"
        gen1 = PENROSE.generation(1)
        assert len(gen1) == 113
        assert ex.render(gen1).startswith("[+OF--PF[---MF--NF]+]++")
        # F becomes Q, which has no drawing command.
        assert Penrose.Q in PENROSE.generation(2)
        assert ex.commands is not None
        assert ex.commands[Penrose.Q] == Dummy()
        trace(to_commands(PENROSE.generation(3), ex.commands or {}))


class TestParametric:
    def test_abop_example(self) -> None:
        gens = PARAMETRIC.generations(5)
        assert gens[0] == [B(2.0), A(4.0, 4.0)]
        assert gens[1] == [B(1.0), B(4.0), A(1.0, 0.0)]
        assert gens[2] == [B(0.0), B(3.0), A(2.0, 1.0)]
        assert gens[3] == [C(), B(2.0), A(4.0, 3.0)]
        assert gens[4] == [C(), B(1.0), A(8.0, 7.0)]

    def test_render(self) -> None:
        ex = GRAMMARS["parametric"]
        assert ex.render(PARAMETRIC.generation(4)) == "C B(1) A(8, 7)"


class TestRegistry:
    def test_names(self) -> None:
        assert set(GRAMMARS) == {
            "algae",
            "anabaena",
            "koch",
            "sierpinski",
            "seaweed",
            "penrose",
            "parametric",
        }

    def test_drawable_examples_cover_their_alphabet(self) -> None:
        for ex in GRAMMARS.values():
            if ex.commands is None:
                continue
            for gen in ex.grammar.generations(3):
                to_commands(gen, ex.commands)
