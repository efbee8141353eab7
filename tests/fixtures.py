"""Sitemap and page markup shared by the parser and collector tests."""

WHISKYAUCTION_ROOT_SITEMAP = """<?xml version="1.0" encoding="UTF-8"?>
<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <sitemap>
    <loc>https://whisky.auction/sitemap.xml?auctionId=101</loc>
    <lastmod>2024-01-20</lastmod>
  </sitemap>
  <sitemap>
    <loc>https://whisky.auction/sitemap-pages.xml</loc>
    <lastmod>2024-01-18</lastmod>
  </sitemap>
  <sitemap>
    <loc>https://whisky.auction/sitemap.xml?auctionId=102</loc>
    <lastmod>2024-01-19</lastmod>
  </sitemap>
</sitemapindex>
"""

WHISKYAUCTION_SUB_SITEMAP_101 = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url>
    <loc>https://whisky.auction/lot/1001</loc>
    <lastmod>2024-01-15</lastmod>
  </url>
  <url>
    <loc>https://whisky.auction/lot/1002</loc>
  </url>
</urlset>
"""

WHISKYAUCTION_SUB_SITEMAP_102 = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url>
    <loc>https://whisky.auction/lot/1001</loc>
  </url>
  <url>
    <loc>https://elsewhere.example.com/lot/9</loc>
  </url>
  <url>
    <lastmod>2024-01-15</lastmod>
  </url>
</urlset>
"""

WHISKYAUCTION_PAGE = """<!DOCTYPE html>
<html><body>
<div class="product-data">
  <h1>
    <span class="lotName1 line-1">Macallan 1987 Gran Reserva</span>
    <span class="lotName3 line-3">70cl / 46.0%</span>
  </h1>
  <div class="lot-detail-data">
    <div class="hammerprice"><div><span class="winningBid">£21,500</span></div></div>
  </div>
</div>
<div id="contentsecondary">
  <div>
    <div class="content">
      <div class="meta">
        <div class="metawrap">
          <div><span>Age</span> <span>30</span></div>
          <div><span>Vintage</span> <span>1987</span></div>
          <div><span>Region</span> <span>Speyside</span></div>
          <div><span>Bottler</span> <span>Gordon &amp; MacPhail</span></div>
          <div><span>Cask Type</span> <span>Sherry Butt</span></div>
        </div>
      </div>
    </div>
  </div>
</div>
</body></html>
"""

WHISKYAUCTION_PAGE_UNSOLD = """<!DOCTYPE html>
<html><body>
<div class="product-data">
  <h1><span class="lotName1 line-1">Bowmore Black</span></h1>
  <div class="lot-detail-data">
    <div class="hammerprice"><div><span class="winningBid">N/A</span></div></div>
  </div>
</div>
<div id="contentsecondary"><div><div class="content"><div class="meta">
  <div class="metawrap"><div><span>Region</span> <span>Islay</span></div></div>
</div></div></div></div>
</body></html>
"""

WHISKYAUCTIONEER_ROOT_SITEMAP = """<?xml version="1.0" encoding="UTF-8"?>
<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <sitemap><loc>https://whiskyauctioneer.com/sitemap.xml?page=1</loc></sitemap>
  <sitemap><loc>https://whiskyauctioneer.com/sitemap.xml?page=2</loc></sitemap>
</sitemapindex>
"""

WHISKYAUCTIONEER_SUB_SITEMAP = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url><loc>https://whiskyauctioneer.com/about-us</loc></url>
  <url><loc>https://whiskyauctioneer.com/lot/215874/port-ellen-1979</loc></url>
  <url><loc>https://whiskyauctioneer.com/auctions</loc></url>
  <url><loc>https://whiskyauctioneer.com/lot/215875/brora-30</loc></url>
</urlset>
"""

WHISKYAUCTIONEER_PAGE = """<!DOCTYPE html>
<html><body>
<div id="new-layout">
  <div class="box-outer">
    <div class="right">
      <div class="left-heading"><h1>Port Ellen 1979 Rare Malts</h1></div>
      <div class="place-bid bid-section bid-info">
        <div class="amount winning"><span>£1,250</span></div>
        <div class="reserve-price">RESERVE HAS BEEN MET</div>
      </div>
    </div>
  </div>
  <div class="productbuttom">
    <div class="left">
      <div class="topvbn">
        <div>
          <p><span>Distillery:</span> <span>Port Ellen</span></p>
          <p><span>Age:</span> <span>22 Year Old</span></p>
          <p><span>Vintage:</span> <span>1979</span></p>
          <p><span>Region:</span> <span>Islay</span></p>
          <p><span>Bottler:</span> <span>N/A</span></p>
          <p><span>Cask Type:</span> <span>N/A</span></p>
          <p><span>Bottled Strength:</span> <span>57.4% ABV</span></p>
          <p><span>Bottle Size:</span> <span>70cl</span></p>
        </div>
      </div>
    </div>
  </div>
</div>
</body></html>
"""

WHISKYAUCTIONEER_PAGE_PROOF_NO_RESERVE = """<!DOCTYPE html>
<html><body>
<div id="new-layout">
  <div class="box-outer">
    <div class="right">
      <div class="left-heading"><h1>Old Forester 1920</h1></div>
      <div class="place-bid bid-section bid-info">
        <div class="amount winning"><span>$980</span></div>
      </div>
    </div>
  </div>
  <div class="productbuttom"><div class="left"><div class="topvbn"><div>
    <p><span>Age:</span> <span>N/A</span></p>
    <p><span>Bottled Strength:</span> <span>100 PROOF</span></p>
  </div></div></div></div>
</div>
</body></html>
"""

WHISKYAUCTIONEER_PAGE_NO_BIDS = """<!DOCTYPE html>
<html><body>
<div id="new-layout">
  <div class="box-outer">
    <div class="right">
      <div class="left-heading"><h1>Brora 30</h1></div>
      <div class="place-bid bid-section bid-info">
        <div class="amount winning"><span>No bids yet</span></div>
      </div>
    </div>
  </div>
  <div class="productbuttom"><div class="left"><div class="topvbn"><div>
    <p><span>Distillery:</span> <span>Brora</span></p>
  </div></div></div></div>
</div>
</body></html>
"""

WHISKYBASE_ROOT_SITEMAP = """<?xml version="1.0" encoding="UTF-8"?>
<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <sitemap><loc>https://www.whiskybase.com/sitemaps/whiskies-1.xml</loc></sitemap>
  <sitemap><loc>https://www.whiskybase.com/sitemaps/distilleries.xml</loc></sitemap>
  <sitemap><loc>https://www.whiskybase.com/sitemaps/whiskies-2.xml</loc></sitemap>
  <sitemap><loc>https://www.whiskybase.com/sitemaps/bottlers.xml</loc></sitemap>
</sitemapindex>
"""

WHISKYBASE_PAGE = """<!DOCTYPE html>
<html><body>
<h1>
  <a href="/whiskies/brand/1/ardbeg">Ardbeg</a>
  1974
    Single Cask
</h1>
<div class="votes"><span class="votes-rating-current">92.50</span></div>
<div id="whisky-details">
  <dl>
    <dt>Whiskybase ID</dt>
    <dd>WB12345</dd>
    <dt>Distillery</dt>
    <dd><a href="/distillery/ardbeg">Ardbeg</a></dd>
    <dt>Bottler</dt>
    <dd>Distillery Bottling</dd>
    <dt>Vintage</dt>
    <dd>06.04.1974</dd>
    <dt>Bottled</dt>
    <dd>09.2011</dd>
    <dt>Strength</dt>
    <dd>52.0 % Vol.</dd>
  </dl>
</div>
</body></html>
"""

WHISKYBASE_PAGE_NO_TITLE = """<!DOCTYPE html>
<html><body>
<div id="whisky-details"><dl><dt>Whiskybase ID</dt><dd>WB1</dd></dl></div>
</body></html>
"""

WHISKYAUCTIONEER_PAGE_EMPTY_CELL = """<!DOCTYPE html>
<html><body>
<div id="new-layout">
  <div class="box-outer">
    <div class="right">
      <div class="left-heading"><h1>Mortlach 1954</h1></div>
      <div class="place-bid bid-section bid-info">
        <div class="amount winning"><span>£3,400</span></div>
      </div>
    </div>
  </div>
  <div class="productbuttom"><div class="left"><div class="topvbn"><div>
    <p><span>Region:</span> <span></span></p>
    <p><span>Bottler:</span> <span>Signatory</span></p>
  </div></div></div></div>
</div>
</body></html>
"""

WHISKYBASE_PAGE_EMPTY_CELL = """<!DOCTYPE html>
<html><body>
<h1>Springbank 10</h1>
<div class="votes"><span class="votes-rating-current">86.10</span></div>
<div id="whisky-details">
  <dl>
    <dt>Whiskybase ID</dt>
    <dd>WB777</dd>
    <dt>Distillery</dt>
    <dd></dd>
    <dt>Bottler</dt>
    <dd>OB</dd>
  </dl>
</div>
</body></html>
"""
