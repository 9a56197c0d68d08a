"""
Word Catalog
=============

Static, locale-scoped category -> word-list table used by the word
selector. The table is built once at import time from the raw lists
below and never mutated afterwards, so it is safe to share between any
number of callers.

Every stored word is normalised: case-folded, diacritics stripped and
reduced to ASCII letters. A word therefore never contains the hyphen
separator, and splitting a generated passphrase on ``-`` always
recovers its word boundaries.

Catalog quality rule: every category of every locale keeps at least 25
words of exactly eight letters, so any length window the UI offers
(minimum 4-8, maximum 8-15) leaves a pool of at least 25 words.
"""

from __future__ import annotations

import unicodedata
from types import MappingProxyType
from typing import Mapping

from passphrase.core.errors import InvalidOptions
from passphrase.core.models import WordCategory

DEFAULT_LOCALE = "en"

_CONCRETE_CATEGORIES: tuple[WordCategory, ...] = (
    WordCategory.COMMON,
    WordCategory.NATURE,
    WordCategory.TECHNOLOGY,
    WordCategory.ABSTRACT,
)


# ===================================================================== #
#  Raw word lists
# ===================================================================== #

_RAW_WORDS: dict[str, dict[WordCategory, list[str]]] = {
    "en": {
        WordCategory.COMMON: """
            backpack bathroom birthday bookcase building calendar campfire
            cardigan carriage children daughter doorbell envelope exercise
            festival football homework hospital language magazine marriage
            medicine midnight neighbor notebook painting pancakes passport
            sandwich shoulder slippers stairway teaspoon textbook umbrella
            workshop yearbook wardrobe shoelace cupboard doorstep
            road door bell book desk lamp shoe soap milk cake
            bread clock house lemon music paper plate spoon towel lunch
            table chair window garden pencil basket bottle candle coffee
            cookie letter market mirror pillow ticket wallet jacket kettle
            ladder button carpet bakery dinner
            blanket sweater kitchen picture balcony holiday morning evening
            breakfast newspaper toothbrush tablecloth photograph television
            restaurant playground basketball grandmother supermarket
            neighborhood refrigerator
        """.split(),
        WordCategory.NATURE: """
            mountain seashore woodland wildlife starfish hedgehog flamingo
            mushroom bluebell pinecone moonbeam snowfall rainfall seashell
            riverbed hillside lakeside sandbank wetlands tortoise antelope
            squirrel magnolia lavender primrose dewdrops twilight sunshine
            seedling sunlight
            fern moss lake pond wave leaf dune reef
            river stone maple cedar
            meadow forest canyon valley breeze tundra lagoon island willow
            blossom orchard prairie sparrow thunder glacier volcano
            sunflower buttercup mistletoe coastline driftwood butterfly
            waterfall evergreen grassland
            kingfisher woodpecker wilderness rainforest hummingbird
            thunderstorm hippopotamus rhododendron chrysanthemum
        """.split(),
        WordCategory.TECHNOLOGY: """
            computer keyboard software hardware database internet protocol
            compiler terminal firewall download password firmware platform
            pipeline function variable debugger robotics wireless touchpad
            joystick graphics template hostname endpoint resistor megabyte
            gigabyte terabyte operator emulator instance checksum datagram
            chip code byte data disk node port
            cache pixel laser cloud
            server router kernel module socket binary
            voltage monitor printer scanner browser
            bandwidth processor algorithm satellite microchip interface
            bluetooth microwave headphone analytics container
            transistor smartphone encryption repository
            motherboard spreadsheet programming semiconductor cybersecurity
            virtualization microcontroller
        """.split(),
        WordCategory.ABSTRACT: """
            kindness patience serenity infinity strength devotion optimism
            humility fairness goodness vitality sympathy presence radiance
            elegance distance endeavor equality eternity identity judgment
            learning momentum paradigm solitude symmetry ambition boldness
            calmness
            hope love zeal
            honor grace truth peace faith glory
            wisdom memory
            freedom courage harmony destiny mystery fortune clarity essence
            justice liberty balance dignity empathy fantasy insight promise
            journey
            happiness gratitude tradition curiosity sincerity integrity
            nostalgia compassion resilience creativity enthusiasm generosity
            imagination inspiration possibility serendipity tranquility
            perseverance independence determination consciousness
            understanding responsibility
        """.split(),
    },
    "es": {
        WordCategory.COMMON: """
            cuaderno cocinero almohada panadero escalera zapatero hospital
            sombrero cuchillo cucharón lavadora chaqueta pantalón calcetín
            ascensor alfombra borrador teléfono desayuno almuerzo vecindad
            estación catedral delantal paraguas maletero alcancía
            casa mesa cama vaso
            silla libro reloj plato leche
            puerta nevera azúcar abuelo sábado
            ventana mercado cortina mochila plátano tenedor domingo perfume
            cartera botella cazuela zapatos juguete familia
            bicicleta pasaporte cerradura bolígrafo carretera periódico
            cumpleaños biblioteca servilleta mantequilla
        """.split(),
        WordCategory.NATURE: """
            mariposa tormenta arcoíris caracola amanecer orquídea arboleda
            estrella helechos desierto invierno jilguero cangrejo libélula
            magnolia robledal cráteres ventisca aguacero escarcha deshielo
            lagartos pingüino leopardo elefante camellos ardillas
            hoja flor nube lago luna
            musgo otoño rocío marea arena árbol cielo bambú brisa
            cometa laguna verano nevada océano piedra medusa romero aurora
            montaña cascada girasol amapola pradera colibrí ballena tortuga
            sendero pantano llanura corteza glaciar gorrión caracol hormiga
            lavanda tomillo palmera naranjo castaño encinar alameda peñasco
            huracán neblina granizo eclipse
            relámpago manantial horizonte atardecer lagartija margarita
            riachuelo primavera tempestad
            luciérnaga golondrina cordillera escarabajo acantilado
        """.split(),
        WordCategory.TECHNOLOGY: """
            pantalla programa servidor internet circuito satélite robótica
            portátil cargador conexión sensores variable terminal descarga
            buscador pistones mecánica lenguaje sintaxis interfaz usuarios
            registro paquetes bitácora emulador servicio consulta gigabyte
            megabyte
            chip byte
            señal datos disco cable píxel motor ratón robot
            antena código
            teclado memoria archivo carpeta batería tableta digital función
            voltaje altavoz máquina monitor escáner
            algoritmo impresora enrutador protocolo navegador microchip
            televisor micrófono auricular ordenador ingeniero engranaje
            eléctrico magnético depurador instancia
            contraseña compilador procesador transistor aplicación
            cortafuegos resistencia
        """.split(),
        WordCategory.ABSTRACT: """
            libertad justicia igualdad valentía silencio misterio voluntad
            dignidad humildad gratitud claridad recuerdo fantasía infinito
            progreso creencia simpatía ausencia aventura travesía plenitud
            grandeza cortesía decencia potencia victoria castidad vocación
            alma amor
            razón honor calma deseo sueño
            bondad verdad pureza gloria
            armonía ternura amistad fortuna destino lealtad belleza nobleza
            alegría energía ilusión emoción paraíso promesa respeto orgullo
            quietud soledad firmeza sentido audacia dulzura caridad
            paciencia esperanza felicidad sabiduría nostalgia eternidad
            confianza serenidad templanza prudencia inocencia sencillez
            elegancia identidad intuición presencia distancia vitalidad
            equilibrio conciencia coherencia curiosidad
            generosidad creatividad imaginación inspiración
            perseverancia independencia determinación responsabilidad
        """.split(),
    },
}


# ===================================================================== #
#  Normalisation and table construction
# ===================================================================== #


def normalize_word(word: str) -> str:
    """Case-fold *word*, strip diacritics and keep ASCII letters only.

    >>> normalize_word("Pingüino")
    'pinguino'
    """
    decomposed = unicodedata.normalize("NFKD", word.casefold())
    return "".join(
        ch for ch in decomposed
        if not unicodedata.combining(ch) and "a" <= ch <= "z"
    )


def _dedupe(words: list[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    ordered: list[str] = []
    for word in words:
        if word and word not in seen:
            seen.add(word)
            ordered.append(word)
    return tuple(ordered)


def _build_catalog() -> Mapping[tuple[str, WordCategory], tuple[str, ...]]:
    table: dict[tuple[str, WordCategory], tuple[str, ...]] = {}
    for locale, categories in _RAW_WORDS.items():
        merged: list[str] = []
        for category in _CONCRETE_CATEGORIES:
            words = _dedupe([normalize_word(w) for w in categories[category]])
            table[(locale, category)] = words
            merged.extend(words)
        table[(locale, WordCategory.MIXED)] = _dedupe(merged)
    return MappingProxyType(table)


_CATALOG = _build_catalog()


# ===================================================================== #
#  Public API
# ===================================================================== #


def available_locales() -> tuple[str, ...]:
    """Locales the catalog ships word lists for."""
    return tuple(_RAW_WORDS)


def words_for(
    locale: str, category: WordCategory | str
) -> tuple[str, ...]:
    """Return the normalised word list for (*locale*, *category*).

    Raises:
        InvalidOptions: If the locale or category is unknown.
    """
    try:
        category = WordCategory(category)
    except ValueError as exc:
        raise InvalidOptions(f"Unknown word category: {category!r}") from exc

    try:
        return _CATALOG[(locale, category)]
    except KeyError as exc:
        raise InvalidOptions(
            f"Unknown locale {locale!r}; available: "
            f"{', '.join(available_locales())}"
        ) from exc
