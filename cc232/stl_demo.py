"""Timed comparisons of standard-library algorithm choices on list workloads."""

from __future__ import annotations

import bisect
import heapq
import random
import re
import sys
import time
from dataclasses import dataclass
from itertools import groupby
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

_MASK64 = (1 << 64) - 1
_CHECKSUM_MULTIPLIER = 1315423911
_CHECKSUM_OFFSET = 1000003
_PREFIX_QUERIES = 80000
_TOP_K = 50


@dataclass(frozen=True)
class TimerResult:
    label: str
    microseconds: float = 0.0


@dataclass
class Student:
    """A record ranked by score (highest first), then by id (lowest first)."""

    id: int = 0
    score: int = 0
    name: str = ""

    def __lt__(self, other: "Student") -> bool:
        if self.score != other.score:
            return self.score > other.score
        return self.id < other.id


def _rank(student: Student) -> Tuple[int, int]:
    return (-student.score, student.id)


class Bench:
    """Best-of-N wall-clock timing and a fixed-width report table."""

    @staticmethod
    def run(label: str, fn: Callable[[], object], repeat: int = 1) -> TimerResult:
        """Call fn repeat times and keep the fastest run, in microseconds."""
        best = sys.float_info.max
        for _ in range(repeat):
            start = time.perf_counter_ns()
            fn()
            elapsed = (time.perf_counter_ns() - start) / 1000.0
            best = min(best, elapsed)
        return TimerResult(label, best)

    @staticmethod
    def format_table(title: str, results: Iterable[TimerResult]) -> str:
        lines = [
            f"\n {title}",
            f"{'Caso':<35}{'Tiempo (us)':>15}",
            "-" * 50,
        ]
        lines.extend(f"{r.label:<35}{r.microseconds:>15.2f}" for r in results)
        return "".join(line + "\n" for line in lines)


def make_rng(seed: Optional[int] = None) -> random.Random:
    """A random generator; seeded from the system when seed is None."""
    return random.Random(seed)


def scaled(base: int, scale_percent: int) -> int:
    """base scaled by a percentage, never below 1000."""
    return max((base * scale_percent) // 100, 1000)


def random_ints(n: int, low: int, high: int, rng: random.Random) -> List[int]:
    """n integers drawn uniformly from [low, high]."""
    return [rng.randint(low, high) for _ in range(n)]


def random_students(n: int, rng: random.Random) -> List[Student]:
    """Students with ids 0..n-1, names 's<id>' and random scores."""
    return [Student(i, rng.randint(0, 1000000), f"s{i}") for i in range(n)]


def checksum(data: Iterable[int]) -> int:
    """Order-sensitive 64-bit hash of a sequence of integers."""
    h = 0
    for x in data:
        h = (h * _CHECKSUM_MULTIPLIER + x + _CHECKSUM_OFFSET) & _MASK64
    return h


def checksum_students(data: Sequence[Student], limit: int = 30) -> int:
    """XOR hash of the first ``limit`` students."""
    h = 0
    for s in data[:limit]:
        h ^= (s.id * 239 + s.score * 31 + len(s.name)) & _MASK64
    return h


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def parse_scale(argv: Sequence[str]) -> int:
    """Data scale in percent from the command-line options; the last one wins."""
    scale = 100
    for arg in argv:
        if arg == "--light":
            scale = 35
        elif arg == "--medium":
            scale = 60
        elif arg == "--full":
            scale = 100
        elif arg.startswith("--scale="):
            scale = max(10, min(100, _atoi(arg[len("--scale="):])))
    return scale


def _nth_smallest(items: Sequence[int], k: int) -> int:
    """The value that would sit at index k after sorting (quickselect)."""
    pool = list(items)
    while True:
        pivot = pool[len(pool) // 2]
        lows = [x for x in pool if x < pivot]
        if k < len(lows):
            pool = lows
            continue
        equal = sum(1 for x in pool if x == pivot)
        if k < len(lows) + equal:
            return pivot
        k -= len(lows) + equal
        pool = [x for x in pool if x > pivot]


def _k_smallest(items: Sequence[T], k: int, key: Callable[[T], object]) -> List[T]:
    """The k smallest items in no particular order (quickselect)."""
    result: List[T] = []
    pool = list(items)
    while k > 0 and pool:
        pivot = key(pool[len(pool) // 2])
        lows = [x for x in pool if key(x) < pivot]
        if len(lows) >= k:
            pool = lows
            continue
        result.extend(lows)
        k -= len(lows)
        equal = [x for x in pool if key(x) == pivot][:k]
        result.extend(equal)
        k -= len(equal)
        pool = [x for x in pool if key(x) > pivot]
    return result


def _partition(data: List[int], pred: Callable[[int], bool]) -> int:
    """Move items satisfying pred to the front in place; return the split."""
    lo, hi = 0, len(data) - 1
    while True:
        while lo <= hi and pred(data[lo]):
            lo += 1
        while lo <= hi and not pred(data[hi]):
            hi -= 1
        if lo >= hi:
            return lo
        data[lo], data[hi] = data[hi], data[lo]
        lo += 1
        hi -= 1


def _print_section(title: str, idea: str) -> None:
    print("\n\n ")
    print(title)
    print("-" * 60)
    print(idea)


def _finish(title: str, results: List[TimerResult], comment: str) -> None:
    sys.stdout.write(Bench.format_table(title, results))
    print(f"Comentario: {comment}")


def demo_reserve_vs_no_reserve(scale: int) -> int:
    _print_section(
        "1. Preasignar vs crecimiento incremental de la lista",
        "Idea algoritmica: si conocemos o estimamos el tamano final, preasignar "
        "reduce realocaciones y copias.",
    )
    n = scaled(250000, scale)

    def grow() -> int:
        v: List[int] = []
        for i in range(n):
            v.append(i)
        return checksum(v)

    def preallocated_extend() -> int:
        v: List[int] = []
        v.extend(range(n))
        return checksum(v)

    def indexed() -> int:
        v = [0] * n
        for i in range(n):
            v[i] = i
        return checksum(v)

    results = [
        Bench.run("append sin preasignar", grow, 5),
        Bench.run("extend con tamano conocido", preallocated_extend, 5),
        Bench.run("preasignar y asignar por indice", indexed, 5),
    ]
    _finish("Vector growth", results,
            "preasignar no cambia el Big-O amortizado de append, pero si mejora "
            "la constante oculta.")
    return len(results)


def demo_emplace_vs_push(scale: int) -> int:
    _print_section(
        "2. Construccion directa vs objetos temporales",
        "Idea algoritmica: construir el objeto directamente en el contenedor "
        "evita temporales innecesarios.",
    )
    n = scaled(120000, scale)

    def append_new() -> int:
        v: List[Student] = []
        for i in range(n):
            v.append(Student(i, i % 1000, f"name_{i}"))
        return checksum_students(v)

    def comprehension() -> int:
        v = [Student(i, i % 1000, f"name_{i}") for i in range(n)]
        return checksum_students(v)

    def append_formed() -> int:
        v: List[Student] = []
        for i in range(n):
            s = Student(i, i % 1000, f"name_{i}")
            v.append(s)
        return checksum_students(v)

    results = [
        Bench.run("append(Student(...))", append_new, 4),
        Bench.run("comprension directa", comprehension, 4),
        Bench.run("append con objeto ya formado", append_formed, 4),
    ]
    _finish("Construccion de objetos", results,
            "en tipos simples el efecto puede ser pequeno; en objetos pesados "
            "puede ayudar mas.")
    return len(results)


def demo_nth_element_vs_sort(scale: int, rng: random.Random) -> int:
    _print_section(
        "3. Seleccion vs ordenamiento para k-esimo elemento",
        "Idea algoritmica: si solo quieres la mediana o el k-esimo menor, la "
        "seleccion evita ordenar todo el arreglo.",
    )
    base = random_ints(scaled(180000, scale), 1, 1000000000, rng)
    k = len(base) // 2

    results = [
        Bench.run("sort completo y tomar mediana", lambda: sorted(base)[k], 4),
        Bench.run("seleccion para mediana", lambda: _nth_smallest(base, k), 4),
    ]
    _finish("Seleccion estadistica", results,
            "la seleccion suele comportarse en O(n) promedio; sort requiere O(n log n).")
    return len(results) + _nth_smallest(base, k % len(base))


def demo_top_k_partial_sort(scale: int, rng: random.Random) -> int:
    _print_section(
        "4. Ordenamiento parcial para Top-K",
        "Idea algoritmica: si solo interesa el Top-K, un ordenamiento parcial "
        "puede ser mejor que ordenar todo.",
    )
    base = random_students(scaled(100000, scale), rng)

    def full_sort() -> int:
        return checksum_students(sorted(base), _TOP_K)

    def partial() -> int:
        return checksum_students(heapq.nsmallest(_TOP_K, base, key=_rank), _TOP_K)

    def select_then_sort() -> int:
        top = sorted(_k_smallest(base, _TOP_K, _rank))
        return checksum_students(top, _TOP_K)

    results = [
        Bench.run("sort completo y tomar top-K", full_sort, 4),
        Bench.run("heapq.nsmallest top-K", partial, 4),
        Bench.run("seleccion + sort solo top-K", select_then_sort, 4),
    ]
    _finish("Top-K", results,
            "Top-K aparece mucho en ranking, busqueda, recomendacion y seleccion parcial.")
    return len(results)


def demo_lower_bound_binary_search(scale: int, rng: random.Random) -> int:
    _print_section(
        "5. Busqueda binaria en lista ordenada vs busqueda lineal",
        "Idea algoritmica: mantener ordenada una lista permite consultas en "
        "O(log n) con excelente localidad de memoria.",
    )
    data = sorted(random_ints(scaled(250000, scale), 0, 1000000000, rng))
    queries = random_ints(scaled(30000, scale), 0, 1000000000, rng)

    def linear() -> int:
        return sum(1 for q in queries if q in data)

    def binary() -> int:
        found = 0
        for q in queries:
            i = bisect.bisect_left(data, q)
            if i < len(data) and data[i] == q:
                found += 1
        return found

    results = [
        Bench.run("busqueda lineal", linear, 2),
        Bench.run("bisect_left", binary, 4),
    ]
    _finish("Consultas en secuencias ordenadas", results,
            "lista ordenada + busqueda binaria es una herramienta muy poderosa "
            "en DSA y programacion competitiva.")
    return len(results)


def demo_sort_unique_dedup(scale: int, rng: random.Random) -> int:
    _print_section(
        "6. sort + unique para eliminar duplicados",
        "Idea algoritmica: deduplicar con sort+unique puede ser muy competitivo "
        "y deja los elementos ordenados.",
    )
    base = random_ints(scaled(220000, scale), 1, 50000, rng)

    def with_set() -> int:
        return len(set(base))

    def sort_unique() -> int:
        return len([key for key, _ in groupby(sorted(base))])

    results = [
        Bench.run("set para deduplicar", with_set, 4),
        Bench.run("sort + unique", sort_unique, 4),
    ]
    _finish("Deduplicacion", results,
            "sort+unique no siempre gana, pero da orden y muchas veces excelente "
            "rendimiento practico.")
    return len(results)


def demo_partition_filter(scale: int, rng: random.Random) -> int:
    _print_section(
        "7. partition() para filtrar sin preservar orden",
        "Idea algoritmica: si el orden no importa, partition suele ser mejor "
        "opcion que copiar uno por uno a otra lista.",
    )
    base = random_ints(scaled(300000, scale), 0, 1000000, rng)

    def is_even(x: int) -> bool:
        return (x & 1) == 0

    def copy_evens() -> int:
        return checksum([x for x in base if is_even(x)])

    def partition_in_place() -> int:
        data = list(base)
        del data[_partition(data, is_even):]
        return checksum(data)

    results = [
        Bench.run("copiar solo pares a nueva lista", copy_evens, 4),
        Bench.run("partition in-place", partition_in_place, 4),
    ]
    _finish("Filtrado", results,
            "partition es util cuando solo importa separar elementos por predicado.")
    return len(results)


def demo_prefix_sum_queries(scale: int, rng: random.Random) -> int:
    _print_section(
        "8. Sumas de prefijos para consultas de rango",
        "Idea algoritmica: preprocesar con prefix sums cambia consultas O(n) por O(1).",
    )
    data = random_ints(scaled(180000, scale), 1, 50, rng)
    ranges: List[Tuple[int, int]] = []
    for _ in range(_PREFIX_QUERIES):
        l = rng.randint(0, len(data) - 1)
        r = rng.randint(0, len(data) - 1)
        ranges.append((min(l, r), max(l, r)))

    def naive() -> int:
        return sum(sum(data[l:r + 1]) for l, r in ranges)

    def prefix() -> int:
        pref = [0]
        for x in data:
            pref.append(pref[-1] + x)
        return sum(pref[r + 1] - pref[l] for l, r in ranges)

    results = [
        Bench.run("sumas de rango simple", naive, 1),
        Bench.run("prefix sums", prefix, 4),
    ]
    _finish("Preprocesamiento para consultas", results,
            "este patron conecta la biblioteca estandar con la tecnica "
            "algoritmica clasica de prefijos.")
    return len(results)


def demo_merge_inplace_merge(scale: int, rng: random.Random) -> int:
    _print_section(
        "9. merge() para combinar secuencias ordenadas",
        "Idea algoritmica: si ya tienes subresultados ordenados, merge evita "
        "reordenar todo desde cero.",
    )
    a = sorted(random_ints(scaled(90000, scale), 0, 1000000000, rng))
    b = sorted(random_ints(scaled(90000, scale), 0, 1000000000, rng))

    results = [
        Bench.run("concatenar y sort", lambda: checksum(sorted(a + b)), 4),
        Bench.run("heapq.merge", lambda: checksum(heapq.merge(a, b)), 4),
    ]
    _finish("Combinar resultados", results,
            "merge aparece en mergesort, intervalos, k-way merge y procesamiento offline.")
    return len(results)


def demo_transform_accumulate(scale: int, rng: random.Random) -> int:
    _print_section(
        "10. filter, map y sum para pipelines simples",
        "Idea algoritmica: la biblioteca estandar permite expresar "
        "transformaciones y agregaciones con codigo compacto y menos errores.",
    )
    data = random_ints(scaled(300000, scale), -1000, 1000, rng)

    def manual() -> int:
        total = 0
        for x in data:
            if x > 0:
                total += x * x
        return total

    def pipeline() -> int:
        positive = filter(lambda x: x > 0, data)
        return sum(map(lambda x: x * x, positive))

    results = [
        Bench.run("for manual: cuadrados positivos", manual, 4),
        Bench.run("filter + map + sum", pipeline, 4),
    ]
    _finish("Pipelines", results,
            "a veces el for manual gana; la leccion es elegir claridad sin perder "
            "de vista el costo.")
    return len(results)


def _print_run_instructions() -> None:
    print("\n\n------Instrucciones-------")
    print("Ejecucion completa:")
    print("  python -m cc232.stl_demo --full\n")
    print("Ejecucion ligera:")
    print("  python -m cc232.stl_demo --light\n")
    print("Escala personalizada (10 a 100):")
    print("  python -m cc232.stl_demo --scale=50")


def _print_class_notes() -> None:
    print("\n\n---------Ideas-----------")
    print("1. Optimizar no es solo micro-optimizar: muchas mejoras vienen de elegir mejor algoritmo.")
    print("2. La biblioteca estandar encapsula algoritmos potentes: seleccion, heapq, bisect, merge.")
    print("3. Big-O manda, pero constantes, cache y realocaciones importan mucho.")
    print("4. Medir ayuda, pero medir mal tambien engana: los benchmarks deben interpretarse con cuidado.")
    print("5. La mejor herramienta depende del problema: Top-K, deduplicacion, consultas, filtrado, etc.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run every demonstration at the scale chosen on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    scale = parse_scale(args)
    try:
        rng = make_rng()
        print("CC232 - Demostracion de optimizacion con algoritmos de la biblioteca estandar")
        print("Este programa muestra patrones utiles para algoritmos y estructuras de datos.")
        print("Los tiempos son ilustrativos y pueden variar segun CPU, interprete y sistema operativo.")
        print(f"Escala de datos: {scale}% (usa --light, --medium o --full).")

        summary = demo_reserve_vs_no_reserve(scale)
        summary += demo_emplace_vs_push(scale)
        summary += demo_nth_element_vs_sort(scale, rng)
        summary += demo_top_k_partial_sort(scale, rng)
        summary += demo_lower_bound_binary_search(scale, rng)
        summary += demo_sort_unique_dedup(scale, rng)
        summary += demo_partition_filter(scale, rng)
        summary += demo_prefix_sum_queries(scale, rng)
        summary += demo_merge_inplace_merge(scale, rng)
        summary += demo_transform_accumulate(scale, rng)

        _print_run_instructions()
        _print_class_notes()
        print(f"\nChecksum resumen: {summary & _MASK64}")
        return 0
    except Exception as ex:  # noqa: BLE001 - report and fail like a top-level handler
        print(f"Error en ejecucion: {ex}", file=sys.stderr)
        print("Prueba correr con --light si tu entorno tiene poca memoria o limites de tiempo.",
              file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())