"""Concept to HSL tables for English and Spanish prompts."""

from __future__ import annotations

from typing import Dict, Tuple

HSL = Tuple[int, int, int]

ENGLISH_COLORS: Dict[str, HSL] = {
    # basic color names
    "red": (0, 80, 50),
    "crimson": (348, 83, 47),
    "scarlet": (8, 90, 50),
    "ruby": (337, 90, 41),
    "burgundy": (345, 100, 25),
    "maroon": (0, 100, 25),
    "vermillion": (10, 85, 52),
    "blue": (220, 80, 50),
    "azure": (210, 100, 60),
    "navy": (230, 70, 22),
    "cobalt": (215, 100, 34),
    "sapphire": (216, 85, 35),
    "cerulean": (196, 100, 40),
    "indigo": (255, 70, 35),
    "green": (120, 60, 40),
    "emerald": (140, 52, 55),
    "jade": (158, 100, 33),
    "lime": (90, 80, 50),
    "olive": (60, 100, 25),
    "mint": (150, 60, 78),
    "yellow": (50, 95, 55),
    "gold": (45, 85, 50),
    "amber": (38, 100, 50),
    "lemon": (55, 100, 60),
    "canary": (56, 100, 68),
    "mustard": (47, 80, 45),
    "saffron": (40, 90, 58),
    "orange": (30, 95, 55),
    "tangerine": (28, 100, 54),
    "coral": (16, 100, 66),
    "peach": (28, 100, 80),
    "apricot": (24, 90, 75),
    "purple": (280, 60, 50),
    "violet": (270, 70, 60),
    "lavender": (265, 50, 78),
    "plum": (300, 47, 45),
    "mauve": (290, 30, 70),
    "orchid": (302, 59, 65),
    "amethyst": (270, 50, 60),
    "pink": (340, 80, 75),
    "rose": (345, 70, 65),
    "fuchsia": (320, 90, 55),
    "magenta": (300, 100, 50),
    "blush": (350, 60, 82),
    "salmon": (6, 93, 71),
    "brown": (25, 55, 32),
    "tan": (34, 44, 69),
    "beige": (40, 40, 84),
    "chocolate": (25, 75, 25),
    "coffee": (28, 45, 30),
    "mocha": (24, 30, 38),
    "sepia": (30, 50, 35),
    "gray": (0, 0, 50),
    "grey": (0, 0, 50),
    "silver": (210, 8, 75),
    "charcoal": (210, 12, 22),
    "slate": (210, 20, 45),
    "ash": (30, 5, 60),
    "pewter": (200, 6, 55),
    "black": (0, 0, 5),
    "ebony": (30, 20, 12),
    "onyx": (240, 10, 10),
    "white": (0, 0, 98),
    "ivory": (60, 100, 97),
    "cream": (45, 80, 92),
    "pearl": (40, 30, 90),
    "alabaster": (45, 40, 93),
    "turquoise": (174, 72, 56),
    "teal": (180, 100, 25),
    "aqua": (180, 80, 60),
    "cyan": (185, 90, 50),
    # nature
    "ocean": (200, 75, 45),
    "sea": (195, 70, 50),
    "water": (195, 60, 60),
    "wave": (190, 65, 55),
    "beach": (45, 60, 80),
    "sand": (40, 50, 75),
    "desert": (35, 60, 65),
    "forest": (130, 45, 28),
    "jungle": (115, 60, 30),
    "leaf": (100, 55, 45),
    "grass": (95, 60, 45),
    "moss": (80, 40, 35),
    "tree": (110, 40, 35),
    "flower": (330, 60, 70),
    "garden": (105, 50, 50),
    "mountain": (210, 20, 50),
    "stone": (30, 10, 55),
    "earth": (28, 40, 35),
    "sky": (200, 80, 70),
    "cloud": (210, 30, 92),
    "rain": (210, 25, 55),
    "storm": (220, 20, 35),
    "snow": (200, 30, 96),
    "ice": (195, 60, 85),
    "fire": (15, 95, 50),
    "lava": (10, 90, 40),
    "sun": (48, 100, 60),
    "moon": (220, 15, 80),
    "star": (50, 80, 85),
    "galaxy": (260, 60, 25),
    "space": (240, 50, 15),
    "aurora": (160, 70, 55),
    "nature": (110, 45, 42),
    "tropical": (160, 75, 45),
    "arctic": (195, 45, 90),
    "volcano": (5, 80, 30),
    "river": (200, 55, 48),
    "lake": (205, 50, 42),
    "coral reef": (12, 80, 62),
    # time and seasons
    "sunset": (20, 90, 60),
    "sunrise": (35, 95, 70),
    "dawn": (15, 70, 80),
    "dusk": (280, 40, 40),
    "twilight": (265, 45, 35),
    "morning": (45, 80, 85),
    "noon": (50, 90, 75),
    "afternoon": (40, 75, 65),
    "evening": (260, 35, 40),
    "night": (235, 55, 18),
    "midnight": (240, 60, 15),
    "spring": (100, 55, 70),
    "summer": (45, 90, 60),
    "autumn": (25, 75, 45),
    "fall": (22, 70, 42),
    "winter": (205, 35, 85),
    # emotions
    "happy": (50, 95, 60),
    "joyful": (45, 100, 62),
    "cheerful": (55, 90, 65),
    "sad": (215, 30, 45),
    "melancholy": (230, 25, 40),
    "angry": (0, 85, 40),
    "calm": (195, 40, 70),
    "peaceful": (190, 35, 75),
    "serene": (200, 40, 78),
    "tranquil": (185, 35, 72),
    "relaxed": (170, 30, 75),
    "excited": (25, 95, 55),
    "energetic": (15, 95, 55),
    "passionate": (355, 85, 45),
    "romantic": (340, 60, 70),
    "mysterious": (270, 50, 25),
    "elegant": (280, 25, 30),
    "sophisticated": (260, 20, 28),
    "playful": (320, 80, 65),
    "serious": (220, 30, 30),
    "bold": (5, 90, 45),
    "confident": (10, 80, 45),
    "powerful": (0, 75, 35),
    "gentle": (340, 30, 85),
    "soft": (300, 25, 86),
    "warm": (25, 80, 60),
    "cool": (200, 60, 60),
    "cozy": (20, 55, 55),
    "fresh": (150, 60, 65),
    "dreamy": (270, 40, 80),
    "nostalgic": (30, 35, 60),
    "vibrant": (330, 95, 55),
    "dramatic": (350, 70, 25),
    # industries and styles
    "tech": (210, 85, 50),
    "technology": (215, 80, 48),
    "digital": (200, 90, 50),
    "cyber": (185, 100, 50),
    "cyberpunk": (300, 100, 55),
    "futuristic": (190, 90, 55),
    "finance": (210, 60, 35),
    "healthcare": (175, 55, 45),
    "medical": (190, 60, 50),
    "education": (35, 85, 55),
    "food": (20, 85, 55),
    "restaurant": (10, 70, 45),
    "fashion": (330, 55, 50),
    "beauty": (345, 50, 75),
    "gaming": (270, 85, 55),
    "music": (290, 70, 50),
    "art": (340, 65, 55),
    "design": (250, 55, 55),
    "corporate": (215, 45, 40),
    "business": (220, 40, 38),
    "professional": (215, 35, 42),
    "startup": (250, 75, 58),
    "creative": (310, 65, 58),
    "luxury": (45, 60, 40),
    "premium": (40, 50, 35),
    "modern": (200, 15, 50),
    "minimalist": (0, 0, 92),
    "vintage": (30, 40, 55),
    "retro": (15, 60, 55),
    "classic": (220, 35, 30),
    "industrial": (210, 10, 40),
    "organic": (90, 40, 45),
    "natural": (95, 35, 48),
    "eco": (120, 45, 42),
    "sustainable": (130, 40, 45),
    "urban": (220, 10, 35),
    "city": (225, 25, 30),
    "neon": (310, 100, 55),
    "electric": (195, 100, 50),
    "pastel": (300, 45, 85),
    "earthy": (30, 40, 40),
    # objects and materials
    "wood": (28, 50, 40),
    "glass": (190, 30, 85),
    "metal": (210, 8, 60),
    "leather": (20, 50, 30),
    "velvet": (330, 60, 28),
    "marble": (0, 0, 93),
    "copper": (22, 70, 45),
    "bronze": (32, 60, 42),
    "wine": (345, 70, 30),
    "honey": (40, 90, 55),
    "caramel": (32, 75, 50),
    "vanilla": (48, 70, 88),
    "champagne": (42, 55, 82),
    "berry": (320, 60, 40),
    "citrus": (60, 90, 55),
    # compound concepts
    "ocean blue": (205, 80, 42),
    "sky blue": (197, 71, 73),
    "forest green": (120, 61, 34),
    "sunset orange": (18, 95, 58),
    "midnight blue": (240, 64, 27),
    "coral pink": (5, 80, 72),
    "mint green": (150, 55, 70),
    "wine red": (350, 75, 32),
    "honey gold": (42, 88, 52),
    "neon electric": (290, 100, 55),
    "golden hour": (38, 90, 62),
    "blue hour": (225, 55, 40),
    "starry night": (230, 60, 20),
    "dark mode": (225, 20, 12),
    "earth tones": (30, 35, 45),
    "pastel colors": (280, 40, 85),
    "aurora borealis": (150, 80, 50),
    "desert sand": (38, 55, 70),
    "autumn leaves": (20, 80, 45),
    "tropical paradise": (170, 80, 45),
    "velvet purple": (285, 55, 30),
    "brick red": (5, 65, 40),
    "denim blue": (215, 50, 45),
    "sunrise yellow": (48, 95, 60),
    "twilight purple": (270, 45, 40),
    "dawn pink": (350, 70, 80),
    "dusk orange": (25, 75, 50),
    "moonlight silver": (215, 18, 82),
    "starlight blue": (220, 60, 75),
    "moss green": (85, 35, 38),
    "sand beige": (38, 45, 78),
    "stone gray": (30, 6, 55),
    "ice blue": (195, 70, 88),
    "fire red": (5, 90, 48),
    "earth brown": (28, 45, 32),
    "cloud white": (210, 20, 96),
    "storm gray": (215, 12, 40),
    "sunset over ocean": (20, 75, 55),
    "sunrise over mountains": (35, 80, 62),
    "midnight sky": (235, 55, 15),
    "twilight forest": (160, 35, 25),
    "morning dew": (150, 40, 85),
    "evening glow": (28, 85, 60),
    "night stars": (230, 50, 18),
    "autumn sunset": (18, 80, 50),
    "winter morning": (205, 35, 88),
    "ocean waves": (195, 70, 45),
    "mountain peaks": (210, 15, 65),
    "spring flowers": (330, 60, 75),
    "winter snow": (200, 25, 95),
    "summer beach": (45, 70, 75),
    "arctic ice": (190, 55, 90),
    "volcanic lava": (10, 95, 45),
    "pine forest": (140, 45, 25),
    "bamboo grove": (90, 40, 50),
    "lake reflection": (200, 45, 55),
    "meadow grass": (95, 50, 45),
    "peaceful forest": (130, 30, 45),
    "calm ocean": (200, 45, 60),
    "energetic city": (15, 85, 55),
    "serene lake": (195, 35, 65),
    "mysterious night": (260, 45, 18),
    "joyful spring": (80, 70, 65),
    "cozy winter": (20, 35, 45),
    "warm summer": (35, 85, 60),
    "cool autumn": (30, 35, 42),
    "vibrant jungle": (130, 75, 35),
    "tranquil garden": (120, 30, 60),
    "relaxing beach": (40, 50, 80),
    "pastel dreamy": (280, 45, 85),
    "light airy": (200, 30, 94),
    "dark mysterious": (260, 40, 15),
    "light theme": (0, 0, 97),
    "neon colors": (305, 100, 56),
    "golden sand": (42, 70, 65),
    "silver water": (200, 12, 70),
    "bronze metal": (30, 55, 45),
    "silk white": (40, 30, 95),
    "marble white": (30, 8, 92),
    "granite gray": (0, 0, 40),
    "leather brown": (25, 50, 30),
    "early morning": (40, 60, 85),
    "late afternoon": (35, 70, 65),
    "magic hour": (20, 80, 60),
    "midnight moon": (225, 25, 70),
    "moonlit sky": (225, 40, 30),
    "milky way": (250, 30, 75),
    "cosmic nebula": (285, 60, 40),
    "solar flare": (30, 100, 55),
    "coffee brown": (25, 45, 28),
    "chocolate dark": (20, 50, 20),
    "vanilla cream": (45, 70, 90),
    "berry purple": (320, 55, 38),
    "citrus yellow": (55, 95, 55),
    "caramel amber": (33, 75, 48),
    "champagne gold": (45, 55, 78),
    "winter frost": (195, 40, 92),
    "tropical island": (175, 70, 50),
    "mediterranean coast": (203, 78, 44),
}

SPANISH_COLORS: Dict[str, HSL] = {
    # colores
    "rojo": (0, 80, 50),
    "carmesí": (348, 83, 47),
    "escarlata": (8, 90, 50),
    "rubí": (337, 90, 41),
    "burdeos": (345, 100, 25),
    "granate": (0, 100, 25),
    "azul": (220, 80, 50),
    "celeste": (200, 80, 70),
    "marino": (230, 70, 22),
    "cobalto": (215, 100, 34),
    "zafiro": (216, 85, 35),
    "índigo": (255, 70, 35),
    "verde": (120, 60, 40),
    "esmeralda": (140, 52, 55),
    "jade": (158, 100, 33),
    "lima": (90, 80, 50),
    "oliva": (60, 100, 25),
    "menta": (150, 60, 78),
    "amarillo": (50, 95, 55),
    "dorado": (45, 85, 50),
    "ámbar": (38, 100, 50),
    "limón": (55, 100, 60),
    "mostaza": (47, 80, 45),
    "naranja": (30, 95, 55),
    "mandarina": (28, 100, 54),
    "coral": (16, 100, 66),
    "durazno": (28, 100, 80),
    "morado": (280, 60, 50),
    "púrpura": (285, 65, 45),
    "violeta": (270, 70, 60),
    "lavanda": (265, 50, 78),
    "ciruela": (300, 47, 45),
    "malva": (290, 30, 70),
    "rosa": (340, 80, 75),
    "rosado": (345, 70, 80),
    "fucsia": (320, 90, 55),
    "magenta": (300, 100, 50),
    "salmón": (6, 93, 71),
    "marrón": (25, 55, 32),
    "café": (28, 45, 30),
    "beige": (40, 40, 84),
    "chocolate": (25, 75, 25),
    "gris": (0, 0, 50),
    "plata": (210, 8, 75),
    "plateado": (210, 10, 72),
    "carbón": (210, 12, 22),
    "pizarra": (210, 20, 45),
    "negro": (0, 0, 5),
    "ébano": (30, 20, 12),
    "blanco": (0, 0, 98),
    "marfil": (60, 100, 97),
    "crema": (45, 80, 92),
    "perla": (40, 30, 90),
    "turquesa": (174, 72, 56),
    # naturaleza
    "océano": (200, 75, 45),
    "mar": (195, 70, 50),
    "agua": (195, 60, 60),
    "playa": (45, 60, 80),
    "arena": (40, 50, 75),
    "desierto": (35, 60, 65),
    "bosque": (130, 45, 28),
    "selva": (115, 60, 30),
    "hoja": (100, 55, 45),
    "flor": (330, 60, 70),
    "jardín": (105, 50, 50),
    "montaña": (210, 20, 50),
    "piedra": (30, 10, 55),
    "tierra": (28, 40, 35),
    "cielo": (200, 80, 70),
    "nube": (210, 30, 92),
    "lluvia": (210, 25, 55),
    "tormenta": (220, 20, 35),
    "nieve": (200, 30, 96),
    "hielo": (195, 60, 85),
    "fuego": (15, 95, 50),
    "sol": (48, 100, 60),
    "luna": (220, 15, 80),
    "estrella": (50, 80, 85),
    "naturaleza": (110, 45, 42),
    "tropical": (160, 75, 45),
    # tiempo y estaciones
    "atardecer": (20, 90, 60),
    "amanecer": (35, 95, 70),
    "alba": (15, 70, 80),
    "crepúsculo": (280, 40, 40),
    "mañana": (45, 80, 85),
    "tarde": (40, 75, 65),
    "noche": (235, 55, 18),
    "medianoche": (240, 60, 15),
    "primavera": (100, 55, 70),
    "verano": (45, 90, 60),
    "otoño": (25, 75, 45),
    "invierno": (205, 35, 85),
    # emociones
    "feliz": (50, 95, 60),
    "alegre": (55, 90, 65),
    "triste": (215, 30, 45),
    "tranquilo": (195, 40, 70),
    "pacífico": (190, 35, 75),
    "sereno": (200, 40, 78),
    "relajado": (170, 30, 75),
    "energético": (15, 95, 55),
    "apasionado": (355, 85, 45),
    "romántico": (340, 60, 70),
    "misterioso": (270, 50, 25),
    "elegante": (280, 25, 30),
    "sofisticado": (260, 20, 28),
    "juguetón": (320, 80, 65),
    "audaz": (5, 90, 45),
    "suave": (300, 25, 86),
    "cálido": (25, 80, 60),
    "fresco": (150, 60, 65),
    "acogedor": (20, 55, 55),
    "vibrante": (330, 95, 55),
    # industrias y estilos
    "tecnología": (215, 80, 48),
    "digital": (200, 90, 50),
    "futurista": (190, 90, 55),
    "finanzas": (210, 60, 35),
    "salud": (175, 55, 45),
    "educación": (35, 85, 55),
    "comida": (20, 85, 55),
    "moda": (330, 55, 50),
    "arte": (340, 65, 55),
    "corporativo": (215, 45, 40),
    "profesional": (215, 35, 42),
    "creativo": (310, 65, 58),
    "lujo": (45, 60, 40),
    "moderno": (200, 15, 50),
    "minimalista": (0, 0, 92),
    "clásico": (220, 35, 30),
    "orgánico": (90, 40, 45),
    "natural": (95, 35, 48),
    "ciudad": (225, 25, 30),
    "urbano": (220, 10, 35),
    "neón": (310, 100, 55),
    "eléctrico": (195, 100, 50),
    "pastel": (300, 45, 85),
    # objetos y materiales
    "oro": (45, 85, 52),
    "madera": (28, 50, 40),
    "vidrio": (190, 30, 85),
    "metal": (210, 8, 60),
    "cuero": (20, 50, 30),
    "terciopelo": (330, 60, 28),
    "mármol": (0, 0, 93),
    "cobre": (22, 70, 45),
    "vino": (345, 70, 30),
    "miel": (40, 90, 55),
    # conceptos compuestos
    "azul océano": (205, 80, 42),
    "azul cielo": (197, 71, 73),
    "verde bosque": (120, 61, 34),
    "azul medianoche": (240, 64, 27),
    "verde menta": (150, 55, 70),
    "vino tinto": (350, 75, 32),
    "neón eléctrico": (290, 100, 55),
    "hora dorada": (38, 90, 62),
    "hora azul": (225, 55, 40),
    "noche estrellada": (230, 60, 20),
    "modo oscuro": (225, 20, 12),
    "tonos tierra": (30, 35, 45),
    "aurora boreal": (150, 80, 50),
    "arena desértica": (38, 55, 70),
    "hojas otoñales": (20, 80, 45),
    "paraíso tropical": (170, 80, 45),
    "ladrillo rojo": (5, 65, 40),
    "naranja atardecer": (18, 95, 58),
    "amarillo amanecer": (48, 95, 60),
    "rosa coral": (5, 80, 72),
    "verde musgo": (85, 35, 38),
    "gris piedra": (30, 6, 55),
    "azul hielo": (195, 70, 88),
    "rojo fuego": (5, 90, 48),
    "marrón tierra": (28, 45, 32),
    "blanco nube": (210, 20, 96),
    "gris tormenta": (215, 12, 40),
    "cielo nocturno": (235, 55, 15),
    "nieve invernal": (200, 25, 95),
    "hielo ártico": (190, 55, 90),
    "lava volcánica": (10, 95, 45),
    "arrecife coral": (12, 80, 62),
    "bosque pacífico": (130, 30, 45),
    "océano tranquilo": (200, 45, 60),
    "ciudad energética": (15, 85, 55),
    "noche misteriosa": (260, 45, 18),
    "invierno acogedor": (20, 35, 45),
    "verano cálido": (35, 85, 60),
    "selva vibrante": (130, 75, 35),
    "pastel soñador": (280, 45, 85),
    "oscuro misterioso": (260, 40, 15),
    "tema claro": (0, 0, 97),
    "colores pastel": (280, 40, 85),
    "colores neón": (305, 100, 56),
    "arena dorada": (42, 70, 65),
    "terciopelo púrpura": (285, 55, 30),
    "mármol blanco": (30, 8, 92),
    "miel dorada": (42, 88, 52),
    "chocolate oscuro": (20, 50, 20),
    "oro champán": (45, 55, 78),
    "isla tropical": (175, 70, 50),
    "costa mediterránea": (203, 78, 44),
}
