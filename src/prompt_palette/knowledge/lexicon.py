"""Closed bilingual vocabularies consulted by the extractor and analyzers."""

from __future__ import annotations

from typing import Dict, Tuple

STOP_WORDS_EN: Tuple[str, ...] = (
    "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "from", "as", "is", "was", "are", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "should", "could",
    "may", "might", "must", "can", "this", "that", "these", "those", "i", "you",
    "he", "she", "it", "we", "they", "my", "your", "our", "their", "me", "us",
    "them", "very", "some", "more", "most", "like", "want", "need", "make",
)

STOP_WORDS_ES: Tuple[str, ...] = (
    "el", "la", "los", "las", "un", "una", "unos", "unas", "y", "o", "pero", "en",
    "a", "de", "del", "al", "con", "por", "para", "sin", "sobre", "es", "son",
    "era", "ser", "estar", "está", "están", "fue", "ha", "han", "hay", "que",
    "este", "esta", "estos", "estas", "ese", "esa", "yo", "tú", "él", "ella",
    "nosotros", "ellos", "mi", "tu", "su", "nuestro", "me", "te", "se", "lo",
    "le", "muy", "más", "menos", "quiero", "necesito", "como",
)

SYNONYMS_EN: Dict[str, Tuple[str, ...]] = {
    "red": ("crimson", "scarlet", "ruby", "burgundy", "maroon", "vermillion"),
    "blue": ("azure", "navy", "cobalt", "sapphire", "cerulean", "indigo"),
    "green": ("emerald", "jade", "lime", "olive", "mint", "forest"),
    "yellow": ("gold", "amber", "lemon", "canary", "mustard", "saffron"),
    "orange": ("tangerine", "coral", "peach", "apricot", "amber"),
    "purple": ("violet", "lavender", "plum", "mauve", "orchid", "amethyst"),
    "pink": ("rose", "fuchsia", "magenta", "blush", "salmon"),
    "brown": ("tan", "beige", "chocolate", "coffee", "mocha", "sepia"),
    "gray": ("grey", "silver", "charcoal", "slate", "ash", "pewter"),
    "black": ("ebony", "jet", "onyx", "coal", "charcoal"),
    "white": ("ivory", "cream", "pearl", "snow", "alabaster"),
    "happy": ("joyful", "cheerful", "delighted", "pleased", "content", "glad"),
    "sad": ("melancholy", "sorrowful", "gloomy", "depressed", "blue"),
    "calm": ("peaceful", "serene", "tranquil", "relaxed", "quiet"),
    "energetic": ("dynamic", "vibrant", "lively", "active", "spirited"),
    "elegant": ("sophisticated", "refined", "graceful", "classy", "stylish"),
    "bold": ("daring", "confident", "striking", "powerful", "strong"),
    "ocean": ("sea", "marine", "aquatic", "nautical", "coastal"),
    "forest": ("woods", "woodland", "jungle", "wilderness"),
    "sky": ("heaven", "celestial", "aerial", "atmosphere"),
    "sunset": ("dusk", "twilight", "evening", "sundown"),
    "sunrise": ("dawn", "daybreak", "morning", "sunup"),
    "modern": ("contemporary", "current", "up-to-date", "new", "recent"),
    "vintage": ("retro", "classic", "antique", "old-fashioned"),
    "luxury": ("premium", "exclusive", "high-end", "upscale", "deluxe"),
    "professional": ("business", "corporate", "formal", "official"),
}

SYNONYMS_ES: Dict[str, Tuple[str, ...]] = {
    "rojo": ("carmesí", "escarlata", "rubí", "burdeos", "granate", "bermellón"),
    "azul": ("celeste", "marino", "cobalto", "zafiro", "cerúleo", "índigo"),
    "verde": ("esmeralda", "jade", "lima", "oliva", "menta", "bosque"),
    "amarillo": ("dorado", "ámbar", "limón", "canario", "mostaza", "azafrán"),
    "naranja": ("mandarina", "coral", "durazno", "albaricoque", "ámbar"),
    "morado": ("violeta", "lavanda", "ciruela", "malva", "orquídea", "amatista"),
    "rosa": ("rosado", "fucsia", "magenta", "rubor", "salmón"),
    "marrón": ("café", "beige", "chocolate", "moka", "sepia"),
    "gris": ("plata", "carbón", "pizarra", "ceniza", "peltre"),
    "negro": ("ébano", "azabache", "ónix", "carbón"),
    "blanco": ("marfil", "crema", "perla", "nieve", "alabastro"),
    "feliz": ("alegre", "contento", "gozoso", "satisfecho"),
    "triste": ("melancólico", "afligido", "sombrío", "deprimido"),
    "tranquilo": ("calmado", "sereno", "pacífico", "relajado"),
    "energético": ("dinámico", "vibrante", "animado", "activo"),
    "elegante": ("sofisticado", "refinado", "gracioso", "distinguido"),
    "audaz": ("atrevido", "confiado", "llamativo", "poderoso"),
    "océano": ("mar", "marino", "acuático", "náutico", "costero"),
    "bosque": ("selva", "floresta", "arboleda"),
    "cielo": ("celestial", "aéreo", "atmósfera"),
    "atardecer": ("crepúsculo", "ocaso", "puesta de sol"),
    "amanecer": ("alba", "madrugada", "aurora"),
    "moderno": ("contemporáneo", "actual", "nuevo", "reciente"),
    "vintage": ("retro", "clásico", "antiguo"),
    "lujo": ("premium", "exclusivo", "lujoso", "deluxe"),
    "profesional": ("negocio", "corporativo", "formal", "oficial"),
}

COMPOUND_CONCEPTS: Tuple[str, ...] = (
    # color and nature
    "ocean blue", "sky blue", "forest green", "sunset orange", "sunrise yellow",
    "midnight blue", "twilight purple", "dawn pink", "dusk orange", "moonlight silver",
    "starlight blue", "coral pink", "moss green", "sand beige", "stone gray",
    "ice blue", "fire red", "earth brown", "cloud white", "storm gray",
    # scenes
    "sunset over ocean", "sunrise over mountains", "midnight sky", "twilight forest",
    "morning dew", "evening glow", "night stars", "autumn sunset", "winter morning",
    "ocean waves", "mountain peaks", "autumn leaves", "spring flowers", "winter snow",
    "summer beach", "desert sand", "tropical paradise", "arctic ice", "volcanic lava",
    "coral reef", "pine forest", "bamboo grove", "lake reflection", "meadow grass",
    # emotion and environment
    "peaceful forest", "calm ocean", "energetic city", "serene lake", "mysterious night",
    "joyful spring", "cozy winter", "warm summer", "cool autumn", "vibrant jungle",
    "tranquil garden", "relaxing beach",
    # moods with a clear color
    "pastel dreamy", "neon electric", "light airy", "dark mysterious",
    # design approaches
    "dark mode", "light theme", "pastel colors", "earth tones", "neon colors",
    # materials
    "golden sand", "silver water", "bronze metal", "velvet purple", "silk white",
    "denim blue", "marble white", "granite gray", "brick red", "leather brown",
    # time of day and sky
    "early morning", "late afternoon", "golden hour", "blue hour", "magic hour",
    "midnight moon", "starry night", "moonlit sky", "aurora borealis", "milky way",
    "cosmic nebula", "solar flare",
    # food and drink
    "coffee brown", "wine red", "honey gold", "chocolate dark", "vanilla cream",
    "mint green", "berry purple", "citrus yellow", "caramel amber", "champagne gold",
    # places and seasons
    "winter frost", "tropical island", "mediterranean coast",
    # spanish
    "azul océano", "azul cielo", "verde bosque", "naranja atardecer", "amarillo amanecer",
    "azul medianoche", "rosa coral", "verde musgo", "gris piedra", "azul hielo",
    "rojo fuego", "marrón tierra", "blanco nube", "gris tormenta",
    "cielo nocturno", "hojas otoñales", "nieve invernal", "arena desértica",
    "paraíso tropical", "hielo ártico", "lava volcánica", "arrecife coral",
    "bosque pacífico", "océano tranquilo", "ciudad energética", "noche misteriosa",
    "invierno acogedor", "verano cálido", "selva vibrante",
    "pastel soñador", "neón eléctrico", "oscuro misterioso",
    "modo oscuro", "tema claro", "colores pastel", "tonos tierra", "colores neón",
    "arena dorada", "terciopelo púrpura", "mármol blanco", "ladrillo rojo",
    "hora dorada", "hora azul", "noche estrellada", "aurora boreal",
    "vino tinto", "miel dorada", "chocolate oscuro", "verde menta", "oro champán",
    "isla tropical", "costa mediterránea",
)

INTENSITY_MODIFIERS: Dict[str, float] = {
    "neon": 1.0, "intense": 0.9, "electric": 0.8, "vibrant": 0.8, "vivid": 0.8,
    "bold": 0.7, "bright": 0.6, "strong": 0.6, "powerful": 0.6, "rich": 0.5,
    "deep": 0.5, "saturated": 0.7, "dramatic": 0.6, "striking": 0.6,
    "soft": -0.3, "gentle": -0.4, "subtle": -0.6, "muted": -0.7, "pale": -0.6,
    "faded": -0.7, "dull": -0.8, "pastel": -0.5, "delicate": -0.5, "quiet": -0.4,
    "neón": 1.0, "intenso": 0.9, "eléctrico": 0.8, "vibrante": 0.8, "vívido": 0.8,
    "audaz": 0.7, "brillante": 0.6, "fuerte": 0.6, "profundo": 0.5,
    "suave": -0.3, "sutil": -0.6, "apagado": -0.7, "pálido": -0.6, "delicado": -0.5,
}

SATURATION_MODIFIERS: Dict[str, float] = {
    "neon": 0.9, "vivid": 0.8, "saturated": 0.8, "vibrant": 0.7, "electric": 0.7,
    "intense": 0.7, "colorful": 0.6, "bold": 0.6, "bright": 0.5, "rich": 0.5,
    "soft": -0.4, "gentle": -0.3, "subtle": -0.5, "pastel": -0.5, "dusty": -0.5,
    "faded": -0.6, "washed": -0.6, "muted": -0.7, "desaturated": -0.8,
    "monochrome": -0.8, "grayscale": -0.9,
    "neón": 0.9, "vívido": 0.8, "saturado": 0.8, "vibrante": 0.7, "eléctrico": 0.7,
    "intenso": 0.7, "colorido": 0.6, "brillante": 0.5,
    "suave": -0.4, "sutil": -0.5, "empolvado": -0.5, "desvaído": -0.6, "apagado": -0.7,
}

LIGHTNESS_MODIFIERS: Dict[str, float] = {
    "pale": 0.6, "light": 0.5, "pastel": 0.5, "airy": 0.5, "luminous": 0.5,
    "bright": 0.4, "soft": 0.2, "dreamy": 0.3, "glowing": 0.3,
    "dark": -0.6, "midnight": -0.6, "noir": -0.7, "night": -0.5, "shadow": -0.5,
    "deep": -0.4, "dim": -0.4, "moody": -0.4, "gothic": -0.6,
    "pálido": 0.6, "claro": 0.5, "luminoso": 0.5, "etéreo": 0.4,
    "oscuro": -0.6, "medianoche": -0.6, "noche": -0.5, "sombra": -0.5, "sombrío": -0.4,
}

WARM_WORDS: Tuple[str, ...] = (
    "warm", "hot", "fire", "sun", "sunny", "sunset", "summer", "autumn", "cozy",
    "red", "orange", "golden", "amber", "spicy", "tropical", "desert", "coral",
    "cálido", "caliente", "fuego", "sol", "verano", "otoño", "acogedor", "dorado",
    "rojo", "naranja", "tropical", "desierto",
)

COOL_WORDS: Tuple[str, ...] = (
    "cool", "cold", "ice", "icy", "winter", "ocean", "sea", "water", "blue",
    "mint", "frost", "arctic", "moon", "aqua", "night", "rain", "snow",
    "fresco", "frío", "hielo", "invierno", "océano", "mar", "agua", "azul",
    "menta", "ártico", "luna", "lluvia", "nieve",
)

EMOTION_WORDS: Tuple[str, ...] = (
    "happy", "sad", "angry", "calm", "excited", "peaceful", "energetic", "relaxed",
    "passionate", "romantic", "mysterious", "elegant", "playful", "serious",
    "professional", "casual", "formal", "cheerful", "melancholy", "joyful", "serene",
    "tranquil", "bold", "confident", "powerful", "gentle", "soft", "warm", "cool",
    "hot", "cold", "cozy", "fresh", "crisp",
    "feliz", "triste", "enojado", "tranquilo", "emocionado", "pacífico", "energético",
    "relajado", "apasionado", "romántico", "misterioso", "elegante", "juguetón",
    "serio", "profesional", "casual", "formal", "alegre", "melancólico", "gozoso",
    "sereno", "calmado", "audaz", "confiado", "poderoso", "gentil", "suave",
    "cálido", "fresco", "caliente", "frío", "acogedor",
)

INDUSTRY_WORDS: Tuple[str, ...] = (
    "tech", "technology", "finance", "healthcare", "medical", "education", "food",
    "restaurant", "fashion", "beauty", "gaming", "music", "art", "design",
    "corporate", "business", "startup", "creative", "luxury", "premium", "modern",
    "vintage", "retro", "minimalist", "industrial", "organic", "natural", "eco",
    "sustainable", "digital", "cyber", "futuristic", "classic", "traditional",
    "contemporary",
    "tecnología", "finanzas", "salud", "médico", "educación", "comida",
    "restaurante", "moda", "belleza", "juegos", "música", "arte", "diseño",
    "corporativo", "negocio", "emprendimiento", "creativo", "lujo", "moderno",
    "minimalista", "orgánico", "ecológico", "sostenible", "digital", "futurista",
    "clásico", "tradicional", "contemporáneo",
)

OBJECT_WORDS: Tuple[str, ...] = (
    "gold", "silver", "wood", "stone", "glass", "metal", "leather", "velvet", "marble",
    "oro", "plata", "madera", "piedra", "vidrio", "cuero", "terciopelo", "mármol",
)

BRAND_PERSONALITIES: Dict[str, Tuple[str, ...]] = {
    "luxury": (
        "luxury", "premium", "exclusive", "elite", "opulent", "lavish", "prestigious",
        "upscale", "high-end", "lujo", "exclusivo", "élite", "opulento", "lujoso",
        "prestigioso",
    ),
    "professional": (
        "corporate", "professional", "executive", "business", "formal", "serious",
        "authoritative", "reliable", "trustworthy", "credible", "established",
        "corporativo", "profesional", "ejecutivo", "negocio", "serio", "confiable",
    ),
    "innovative": (
        "innovative", "creative", "cutting-edge", "pioneering", "visionary",
        "revolutionary", "disruptive", "futuristic", "innovador", "creativo",
        "vanguardia", "pionero", "visionario", "futurista",
    ),
    "friendly": (
        "friendly", "approachable", "warm", "welcoming", "accessible", "relatable",
        "amigable", "accesible", "cálido", "acogedor", "cercano",
    ),
    "bold": (
        "bold", "dynamic", "energetic", "vibrant", "confident", "daring", "adventurous",
        "fearless", "audaz", "dinámico", "energético", "vibrante", "atrevido",
        "aventurero", "intrépido",
    ),
    "calm": (
        "calm", "soothing", "peaceful", "tranquil", "gentle", "serene", "relaxed",
        "harmonious", "balanced", "tranquilo", "calmante", "pacífico", "gentil",
        "sereno", "relajado", "armonioso", "equilibrado",
    ),
    "playful": (
        "playful", "fun", "quirky", "whimsical", "lighthearted", "cheerful", "joyful",
        "juguetón", "divertido", "caprichoso", "alegre", "entretenido",
    ),
    "elegant": (
        "sophisticated", "elegant", "refined", "polished", "graceful", "classy", "chic",
        "stylish", "sofisticado", "elegante", "refinado", "pulido", "distinguido",
    ),
}

# Ordered by priority: digital products, business types, industries.
USE_CASES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("webapp", ("webapp", "web app", "web application", "aplicación web")),
    ("website", ("website", "web", "sitio web", "página web")),
    ("dashboard", ("dashboard", "panel", "tablero")),
    ("saas", ("saas", "software as a service", "software como servicio")),
    ("ecommerce", ("ecommerce", "e-commerce", "online store", "shop", "tienda online", "tienda")),
    ("app", ("app", "mobile app", "mobile", "aplicación móvil", "aplicación")),
    ("landing", ("landing page", "landing", "página de aterrizaje")),
    ("portfolio", ("portfolio", "portafolio")),
    ("blog", ("blog", "magazine", "revista")),
    ("presentation", ("presentation", "slides", "slide deck", "pitch deck", "presentación", "diapositivas")),
    ("startup", ("startup", "start-up", "empresa emergente")),
    ("corporate", ("corporate", "enterprise", "corporativo", "empresa")),
    ("agency", ("agency", "agencia")),
    ("freelance", ("freelance", "freelancer", "autónomo")),
    ("healthcare", ("healthcare", "medical", "health", "hospital", "clinic", "salud", "médico", "clínica")),
    ("finance", ("finance", "banking", "fintech", "finanzas", "banca")),
    ("education", ("education", "learning", "school", "university", "educación", "escuela", "universidad")),
    ("tech", ("tech", "technology", "software", "tecnología")),
    ("gaming", ("gaming", "game", "videogame", "videojuego")),
    ("fashion", ("fashion", "clothing", "apparel", "moda", "ropa")),
    ("food", ("food", "restaurant", "cafe", "bakery", "comida", "restaurante", "panadería")),
    ("travel", ("travel", "tourism", "hotel", "viaje", "turismo")),
    ("fitness", ("fitness", "gym", "wellness", "gimnasio", "bienestar")),
    ("real-estate", ("real estate", "property", "inmobiliaria", "propiedad", "bienes raíces")),
)

CONTEXT_GROUPS: Dict[str, Tuple[str, ...]] = {
    "time": (
        "morning", "noon", "afternoon", "evening", "night", "midnight", "sunset",
        "sunrise", "dawn", "dusk", "twilight", "mañana", "mediodía", "tarde", "noche",
        "medianoche", "atardecer", "amanecer", "alba", "crepúsculo",
    ),
    "season": (
        "spring", "summer", "autumn", "fall", "winter",
        "primavera", "verano", "otoño", "invierno",
    ),
    "environment": (
        "urban", "rural", "city", "nature", "ocean", "mountain", "desert", "forest",
        "beach", "jungle", "urbano", "ciudad", "naturaleza", "océano", "montaña",
        "desierto", "bosque", "playa", "selva",
    ),
    "style": (
        "vintage", "retro", "modern", "classic", "minimalist", "maximalist",
        "moderno", "clásico", "minimalista", "maximalista",
    ),
    "tone": (
        "dark", "light", "bright", "oscuro", "claro", "brillante",
    ),
}

MOOD_WORDS: Dict[str, Tuple[str, ...]] = {
    "energetic": (
        "energy", "energetic", "vibrant", "dynamic", "exciting", "active", "bright",
        "electric", "neon", "energía", "energético", "vibrante", "dinámico",
        "emocionante", "activo", "brillante", "eléctrico", "neón",
    ),
    "calm": (
        "calm", "peaceful", "serene", "tranquil", "relaxed", "soothing", "gentle",
        "soft", "tranquilo", "pacífico", "sereno", "relajado", "calmante", "gentil",
        "suave",
    ),
    "professional": (
        "professional", "corporate", "business", "formal", "serious", "clean",
        "profesional", "corporativo", "negocio", "serio", "limpio",
    ),
    "playful": (
        "playful", "fun", "cheerful", "happy", "joyful", "whimsical", "quirky",
        "juguetón", "divertido", "alegre", "feliz", "gozoso", "caprichoso",
    ),
    "elegant": (
        "elegant", "sophisticated", "luxury", "premium", "refined", "classy",
        "elegante", "sofisticado", "lujo", "refinado", "distinguido",
    ),
    "bold": (
        "bold", "strong", "powerful", "dramatic", "striking", "intense",
        "audaz", "fuerte", "poderoso", "dramático", "llamativo", "intenso",
    ),
    "natural": (
        "natural", "organic", "earthy", "nature", "botanical", "green", "eco",
        "orgánico", "terrenal", "naturaleza", "botánico", "verde", "ecológico",
    ),
    "modern": (
        "modern", "contemporary", "tech", "digital", "futuristic", "minimalist",
        "moderno", "contemporáneo", "tecnología", "futurista", "minimalista",
    ),
}

# Phrase cues checked in order against the normalized prompt.
EXPLICIT_HARMONY_CUES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("complementary", ("complementary", "contrast", "complementario", "contraste")),
    ("analogous", ("analogous", "similar", "harmoni", "análogo", "armoni")),
    ("triadic", ("triadic", "three", "triádico", "tres")),
    ("tetradic", ("tetradic", "four", "square", "tetrádico", "cuatro")),
    ("monochromatic", ("monochromatic", "single", "one color", "monocromático", "único", "un color")),
    ("split-complementary", ("split",)),
)

CONTRAST_CUES: Tuple[str, ...] = (
    "bold", "vibrant", "dynamic", "energetic", "exciting", "neon", "electric",
    "audaz", "vibrante", "dinámico", "energético", "emocionante", "neón", "eléctrico",
)

HARMONY_CUES: Tuple[str, ...] = (
    "calm", "peaceful", "serene", "gentle", "soft", "subtle",
    "tranquilo", "pacífico", "sereno", "gentil", "suave", "sutil",
)

BALANCE_CUES: Tuple[str, ...] = (
    "balanced", "stable", "professional", "corporate",
    "equilibrado", "estable", "profesional", "corporativo",
)
