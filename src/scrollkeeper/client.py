"""Browser snippet — the scroll controller for real pages.

Injected before ``</body>`` by ``ScrollResetMiddleware`` (or printed by
``scrollkeeper snippet`` for static sites). Mirrors
``NavigationScrollController``:

- Immediate reset when the script runs.
- Location changes are detected by wrapping ``history.pushState`` /
  ``history.replaceState`` and listening for ``popstate``. Each change
  cancels the pending generation, resets, then schedules one reset per
  configured delay.
- A delegated ``click`` listener resets once more after any click on an
  internal, same-context link (``closest()`` over the configured tags).
- Idempotent guard (``window.__scrollkeeper``) prevents double-init.
- ``window.__scrollkeeper.detach()`` cancels pending timers, removes both
  listeners, and restores the original history methods.
"""

import json

from scrollkeeper.config import ScrollConfig

_JS_TEMPLATE = """\
(function(){
  if(window.__scrollkeeper)return;
  var cfg=%(config)s;
  var attached=true;
  var pending=[];
  var wrapped=[];
  var last=location.pathname+location.search;
  function reset(){try{window.scrollTo({top:0,left:0,behavior:cfg.behavior});}catch(e){}}
  function later(ms){
    if(!attached)return;
    var id=setTimeout(function(){
      var i=pending.indexOf(id);
      if(i!==-1)pending.splice(i,1);
      if(attached)reset();
    },ms);
    pending.push(id);
  }
  function cancel(){while(pending.length)clearTimeout(pending.pop());}
  function changed(){
    if(!attached)return;
    var now=location.pathname+location.search;
    if(now===last)return;
    last=now;cancel();reset();
    cfg.delays.forEach(function(ms){later(ms);});
  }
  function internal(href){
    if(href.charAt(0)!=="/"||href.charAt(1)==="/"||href.charAt(1)==="\\\\")return false;
    return href.split(/[?#]/)[0].indexOf("://")===-1;
  }
  ["pushState","replaceState"].forEach(function(name){
    var orig=history[name];
    var wrapper=function(){var r=orig.apply(this,arguments);changed();return r;};
    history[name]=wrapper;
    wrapped.push({name:name,orig:orig,wrapper:wrapper});
  });
  function click(e){
    if(!attached)return;
    var link=e.target&&e.target.closest?e.target.closest(cfg.selector):null;
    if(!link)return;
    if(!internal(link.getAttribute("href")||""))return;
    var target=link.getAttribute("target");
    if(target&&target.toLowerCase()!=="_self")return;
    if(link.hasAttribute("download"))return;
    later(cfg.click);
  }
  window.addEventListener("popstate",changed);
  document.addEventListener("click",click);
  window.__scrollkeeper={detach:function(){
    attached=false;
    cancel();
    wrapped.forEach(function(w){if(history[w.name]===w.wrapper)history[w.name]=w.orig;});
    window.removeEventListener("popstate",changed);
    document.removeEventListener("click",click);
    delete window.__scrollkeeper;
  }};
  reset();
})();
"""


def _ms(seconds: float) -> int:
    return round(seconds * 1000)


def scroll_reset_js(config: ScrollConfig | None = None) -> str:
    """Render the controller script for *config* (defaults if omitted)."""
    config = config or ScrollConfig()
    settings = {
        "delays": [_ms(delay) for delay in config.reset_delays],
        "click": _ms(config.click_reset_delay),
        "behavior": config.behavior,
        "selector": ",".join(config.link_tags),
    }
    encoded = json.dumps(settings, separators=(",", ":")).replace("</", "<\\/")
    return _JS_TEMPLATE % {"config": encoded}


def scroll_reset_snippet(config: ScrollConfig | None = None) -> str:
    """The ``<script>`` tag to place before ``</body>``."""
    return '<script data-scrollkeeper="scroll-reset">' + scroll_reset_js(config) + "</script>"
