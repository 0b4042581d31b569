from multieff import render
from multieff.build import handle, handler, lam, letrec, perform, var
from multieff.config import RunConfig
from multieff.level3_core_effects import Ok
from multieff.prelude import cons
from multieff.run import sync_run


class TestRender:
    def test_scalars(self):
        assert render(None) == "()"
        assert render(True) == "true"
        assert render(False) == "false"
        assert render(3) == "3"
        assert render("hi") == "'hi'"

    def test_containers(self):
        assert render([[3], [2, 1]]) == "[[3], [2, 1]]"
        assert render(([1], 2)) == "([1], 2)"
        assert render({"a": None}) == "{'a': ()}"

    def test_host_function(self):
        assert render(cons) == "<host cons>"

    def test_dataclass_value_uses_str(self):
        assert render(Ok(1)) == "Ok(value=1)"

    def test_closures(self, registry):
        anonymous = sync_run(lam("x", body=var("x")), registry, config=RunConfig()).unwrap()
        named = sync_run(
            letrec("f", ["a", "b"], var("a"), var("f")), registry, config=RunConfig()
        ).unwrap()

        assert render(anonymous) == "<fn lambda/1>"
        assert render(named) == "<fn f/2>"

    def test_continuation(self, registry):
        registry.declare_effect("escape", [("grab", 0)])
        program = handle(perform("grab"), handler(grab=lam("k", body=var("k"))))

        k = sync_run(program, registry, config=RunConfig()).unwrap()

        assert render(k) == (
            f"<continuation k{k.cont_id} grab -> frame {k.target_frame_id}>"
        )
