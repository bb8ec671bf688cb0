"""
Demonstration catalog loaded into the in-memory backend on startup.
"""
from storefront.models import ArticleCreate, CategoryCreate, ProductCreate

_UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=800&q=80"

SEED_CATEGORIES = [
    CategoryCreate(name="Swimwear", slug="swimwear"),
    CategoryCreate(name="Resort Wear", slug="resort-wear"),
    CategoryCreate(name="Accessories", slug="accessories"),
    CategoryCreate(name="Sustainable Jewelry", slug="jewelry"),
    CategoryCreate(name="Home Collection", slug="home-collection"),
    CategoryCreate(name="Coming Soon", slug="coming-soon"),
]

SEED_PRODUCTS = [
    ProductCreate(
        name="Coral Reef One-Piece",
        description="Made from recycled nylon, this one-piece swimsuit features a coral-inspired design and offers excellent support.",
        price=250,
        images=[_UNSPLASH.format("1570900649218-2d1a3508ee65")],
        category="swimwear",
        is_featured=True,
        is_limited=True,
        limited_count=50,
        sustainable_materials=["Recycled Nylon"],
        made_in="India",
    ),
    ProductCreate(
        name="Amalfi Halter Bikini",
        description="An elegant halter bikini crafted from Econyl regenerated nylon.",
        price=225,
        images=[_UNSPLASH.format("1574177556859-1362f72ed6f9")],
        category="swimwear",
        is_featured=True,
        is_limited=True,
        limited_count=35,
        sustainable_materials=["Econyl"],
        made_in="Italy",
    ),
    ProductCreate(
        name="Jaipur Bandeau Set",
        description="A bandeau bikini set inspired by the colors of Jaipur, made with a linen blend.",
        price=275,
        images=[_UNSPLASH.format("1625039217876-334db65a549a")],
        category="swimwear",
        is_featured=True,
        sustainable_materials=["Sustainable Linen Blend"],
        made_in="India",
    ),
    ProductCreate(
        name="Kerala Linen Maxi Dress",
        description="A flowing maxi dress made from 100% organic linen.",
        price=385,
        images=[_UNSPLASH.format("1600102587914-39f3a4a48266")],
        category="resort-wear",
        is_featured=True,
        sustainable_materials=["Organic Linen"],
        made_in="India",
    ),
    ProductCreate(
        name="Mumbai Silk Kaftan",
        description="A peace silk kaftan with hand-painted coastal motifs.",
        price=420,
        images=[_UNSPLASH.format("1562137369-1a1a0bc66744")],
        category="resort-wear",
        is_limited=True,
        limited_count=25,
        sustainable_materials=["Peace Silk"],
        made_in="India",
    ),
    ProductCreate(
        name="Rajasthan Woven Tote",
        description="Handcrafted tote bag woven from recycled cotton.",
        price=180,
        images=[_UNSPLASH.format("1590874103328-eac38a683ce7")],
        category="accessories",
        is_featured=True,
        sustainable_materials=["Recycled Cotton"],
        made_in="India",
    ),
    ProductCreate(
        name="Bombay Sun Hat",
        description="A wide-brimmed sun hat woven from sustainably harvested palm leaves.",
        price=135,
        images=[_UNSPLASH.format("1575428652377-a2d80e2277fc")],
        category="accessories",
        sustainable_materials=["Natural Palm"],
        made_in="India",
    ),
    ProductCreate(
        name="Ocean Wave Earrings",
        description="Earrings crafted from recycled sterling silver.",
        price=165,
        images=[_UNSPLASH.format("1630019852942-f87a2bdad8c9")],
        category="jewelry",
        is_featured=True,
        is_limited=True,
        limited_count=30,
        sustainable_materials=["Recycled Silver"],
        made_in="India",
    ),
    ProductCreate(
        name="Lotus Pendant Necklace",
        description="A lotus pendant made from ethical gold.",
        price=210,
        images=[_UNSPLASH.format("1599643478518-a784e5dc4c8f")],
        category="jewelry",
        is_featured=True,
        sustainable_materials=["Ethical Gold"],
        made_in="India",
    ),
    ProductCreate(
        name="Organic Cotton Throw",
        description="An organic cotton throw with hand-block printed designs.",
        price=195,
        images=[_UNSPLASH.format("1617004887317-5ca23b82d1b3")],
        category="home-collection",
        is_featured=True,
        sustainable_materials=["Organic Cotton"],
        made_in="India",
    ),
    ProductCreate(
        name="Coconut Wax Candle Set",
        description="Three coconut wax candles in recycled brass containers.",
        price=120,
        images=[_UNSPLASH.format("1588372405219-e40d64efafcb")],
        category="home-collection",
        is_limited=True,
        limited_count=40,
        sustainable_materials=["Coconut Wax", "Recycled Brass"],
        made_in="India",
    ),
]

SEED_ARTICLES = [
    ArticleCreate(
        title="The Making of Sustainable Fabrics",
        slug="making-of-sustainable-fabrics",
        content="How renewable resources become fabrics with a small environmental footprint.",
        excerpt="How renewable resources become fabrics with a small environmental footprint.",
        cover_image=_UNSPLASH.format("1503664974816-7691ca85b22f"),
        category="sustainability",
    ),
    ArticleCreate(
        title="Conscious Style: A Conversation",
        slug="conscious-style-a-conversation",
        content="A conversation about sustainability, style, and conscious choices.",
        excerpt="A conversation about sustainability, style, and conscious choices.",
        cover_image=_UNSPLASH.format("1529626455594-4ff0802cfb7e"),
        category="interviews",
    ),
    ArticleCreate(
        title="Cultural Inspirations: Mumbai to Jaipur",
        slug="cultural-inspirations-mumbai-to-jaipur",
        content="The textile traditions and architectural motifs behind the collection.",
        excerpt="The textile traditions and architectural motifs behind the collection.",
        cover_image=_UNSPLASH.format("1596547615875-bced1ffb5c6b"),
        category="inspiration",
    ),
]
