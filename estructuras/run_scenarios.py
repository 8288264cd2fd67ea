import sys
from typing import Callable, List, Optional, Tuple

from loguru import logger

from assertions import assert_equal
from associative_array import AssociativeArray
from items import EmptyContainerError
from linear_structures import Queue, Stack


LOG_FORMAT = "<level>{level: <8}</level> | {message}"


class ScenarioResult:
    """Stores the result of a single scenario."""

    def __init__(self, name: str, passed: bool, message: str = ""):
        self.name = name
        self.passed = passed
        self.message = message

    def __str__(self):
        status = "PASS" if self.passed else "FAIL"
        msg = f"  {self.message}" if self.message else ""
        return f"{status} - {self.name}{msg}"


# ESCENARIOS
# Cada escenario regresa la lista de resultados de assert_equal que hizo.

def stack_scenario() -> List[bool]:
    st = Stack()
    checks = [assert_equal(st.is_empty(), True, "Stack is empty on creation")]

    st.add_item(3)
    checks.append(assert_equal(st.is_empty(), False, "Stack is not empty after one item added"))

    i = st.peek_last_item()
    checks.append(assert_equal(i, 3, "Peeking last item gets us the last item"))
    checks.append(assert_equal(len(st), 1, "Peeking does not change the stack length"))
    checks.append(assert_equal(st.is_empty(), False, "Stack is not emptied by peeking"))

    i2 = st.get_last_item()
    checks.append(assert_equal(i2, 3, "Stack returns last item on get_last_item"))
    checks.append(assert_equal(st.is_empty(), True, "Stack is empty after popping last item"))
    return checks


def queue_scenario() -> List[bool]:
    qu = Queue()
    checks = [assert_equal(qu.is_empty(), True, "Queue is empty on creation")]

    qu.add_item(3)
    checks.append(assert_equal(qu.is_empty(), False, "Queue is not empty after one item added"))

    j = qu.peek_first_item()
    checks.append(assert_equal(j, 3, "Peeking first item gets us the first item"))
    checks.append(assert_equal(qu.is_empty(), False, "Queue is not emptied by peeking"))

    j2 = qu.get_first_item()
    checks.append(assert_equal(j2, 3, "Queue returns first item on get_first_item"))
    checks.append(assert_equal(qu.is_empty(), True, "Queue is empty after popping last item"))
    return checks


def reassign_scenario() -> List[bool]:
    aa = AssociativeArray()
    aa.insert("drink", "whiskey")
    aa.reassign("drink", "tea")
    return [
        assert_equal(aa.lookup("drink"), "tea", "Reassigned value is returned by lookup"),
        assert_equal(len(aa), 1, "Reassign does not change the number of pairs"),
    ]


def remove_scenario() -> List[bool]:
    aa = AssociativeArray()
    checks = [assert_equal(aa.is_empty(), True, "Associative Array is empty on creation")]

    aa.insert("isSuperCool", True)
    checks.append(assert_equal(aa.is_empty(), False, "Associative Array is not empty after inserting one pair"))

    aa.remove("isSuperCool")
    checks.append(assert_equal(aa.is_empty(), True, "Associative Array is empty after removing one pair"))
    return checks


def missing_key_scenario() -> List[bool]:
    aa = AssociativeArray()
    return [
        assert_equal(aa.lookup("missing"), None, "Lookup of a missing key returns nothing"),
        assert_equal(aa.is_empty(), True, "Lookup of a missing key does not modify storage"),
    ]


def expect_empty_failure(name: str, operation: Callable[[], object]) -> bool:
    """
    Llama a operation sobre un contenedor vacío; debe lanzar EmptyContainerError.
    """
    try:
        operation()
    except EmptyContainerError:
        return True
    print("Assertion Failed: ", f"{name} on an empty container must fail")
    print(name, "did not raise EmptyContainerError")
    return False


def empty_container_scenario() -> List[bool]:
    return [
        expect_empty_failure("get_last_item", Stack().get_last_item),
        expect_empty_failure("peek_last_item", Stack().peek_last_item),
        expect_empty_failure("get_first_item", Queue().get_first_item),
        expect_empty_failure("peek_first_item", Queue().peek_first_item),
    ]


SCENARIOS: List[Tuple[str, Callable[[], List[bool]]]] = [
    ("stack: add, peek, get", stack_scenario),
    ("queue: add, peek, get", queue_scenario),
    ("associative array: reassign", reassign_scenario),
    ("associative array: remove", remove_scenario),
    ("associative array: missing key", missing_key_scenario),
    ("stack/queue: empty access", empty_container_scenario),
]


class ScenarioRunner:
    """Runs all scenarios and generates a report."""

    def __init__(self, scenarios: Optional[List[Tuple[str, Callable[[], List[bool]]]]] = None):
        self.scenarios = SCENARIOS if scenarios is None else scenarios
        self.results: List[ScenarioResult] = []

    def run_all(self) -> bool:
        """
        Run every scenario.

        Returns: True if all scenarios pass, False otherwise
        """
        print("="*70)
        print("EJECUTANDO ESCENARIOS DE ESTRUCTURAS")
        print("="*70)

        for name, scenario in self.scenarios:
            result = self._run_scenario(name, scenario)
            self.results.append(result)
            print(result)

        self._print_summary()

        return all(result.passed for result in self.results)

    def _run_scenario(self, name: str, scenario: Callable[[], List[bool]]) -> ScenarioResult:
        """Run a single scenario."""
        logger.debug("Running scenario '{}'", name)
        try:
            checks = scenario()
        except Exception as e:
            logger.exception("Scenario '{}' raised", name)
            return ScenarioResult(
                name=name,
                passed=False,
                message=f"\n    Error inesperado: {str(e)[:100]}..."
            )

        failed = checks.count(False)
        if failed:
            return ScenarioResult(
                name=name,
                passed=False,
                message=f"({failed} de {len(checks)} comprobaciones fallaron)"
            )
        return ScenarioResult(name=name, passed=True)

    def _print_summary(self):
        """Print scenario summary."""
        print("\n" + "="*70)
        print("RESUMEN DE ESCENARIOS")
        print("="*70)

        total = len(self.results)
        passed = sum(1 for r in self.results if r.passed)
        failed = total - passed

        print(f"\nTotal de escenarios: {total}")
        print(f"Pasados:     {passed}")
        print(f"Fallados:    {failed}")

        if failed == 0:
            print("\n¡TODOS LOS ESCENARIOS PASARON!")
        else:
            print(f"\n{failed} escenario(s) fallaron. Revisa los errores arriba.")

        print("="*70)


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Reemplaza el sink por defecto de loguru.

    --verbose muestra las trazas DEBUG de cada escenario,
    --quiet oculta también los avisos de llaves inexistentes.
    """
    level = "DEBUG" if verbose else "ERROR" if quiet else "WARNING"
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    if "--help" in args or "-h" in args:
        print("Uso:")
        print("  estructuras-scenarios [--verbose | --quiet]")
        print("\nOpciones:")
        print("  --verbose   Muestra cada escenario conforme se ejecuta")
        print("  --quiet     Oculta los avisos de llaves no encontradas")
        sys.exit(0)

    configure_logging(verbose="--verbose" in args, quiet="--quiet" in args)

    runner = ScenarioRunner()
    all_passed = runner.run_all()

    sys.exit(0 if all_passed else 1)


if __name__ == "__main__":
    main()
