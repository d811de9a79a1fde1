from __future__ import annotations

INDEX_HTML = """
<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"UTF-8\" />
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1.0\" />
    <title>Deep Research Job Portal</title>
    <style>
      body { background: #0a0a0a; color: #00ff00; font-family: ui-monospace, monospace; margin: 2rem; max-width: 1100px; }
      input { width: 100%; margin: 0.35rem 0; padding: 0.55rem; background: #111; color: #00ff00; border: 1px solid #00ff00; }
      button { padding: 0.55rem 0.9rem; cursor: pointer; margin-top: 0.4rem; background: #00ff00; color: #0a0a0a; border: 0; }
      button:disabled { opacity: 0.5; cursor: wait; }
      .panel { border: 1px solid #00ff00; padding: 1rem; margin-bottom: 1rem; }
      .job-card { border: 1px dashed #00ff00; padding: 1rem; margin: 0.8rem 0; animation: fade-in 0.4s both; }
      .job-link { color: #00ffff; }
      .error-message { color: #ff4040; margin: 0.5rem 0; }
      .status-complete { color: #00ffff; }
      .status-searching { color: #ffff00; }
      .blink { animation: blink 1s steps(1) infinite; }
      @keyframes blink { 50% { opacity: 0; } }
      @keyframes fade-in { from { opacity: 0; } to { opacity: 1; } }
    </style>
  </head>
  <body>
    <h1>DEEP RESEARCH JOB PORTAL</h1>
    <p>JOBS FOUND THIS SESSION: <span id=\"job-count\">0</span></p>

    <div class=\"panel\">
      <label for=\"job-query\">Job title or keywords</label>
      <input id=\"job-query\" placeholder=\"Software Engineer\" />
      <label for=\"location\">Location (optional)</label>
      <input id=\"location\" placeholder=\"Remote\" />
      <button id=\"search-btn\">[ INITIATE DEEP SEARCH ]</button>
    </div>

    <div id=\"status-display\" class=\"panel\"></div>
    <div id=\"results-container\"></div>

    <script>
      const searchBtn = document.getElementById('search-btn');
      const queryInput = document.getElementById('job-query');
      const locationInput = document.getElementById('location');
      const statusDisplay = document.getElementById('status-display');
      const resultsContainer = document.getElementById('results-container');
      const jobCountDisplay = document.getElementById('job-count');
      let jobCount = 0;
      let typingTimer = null;

      function buildNode(spec) {
        const node = document.createElement(spec.tag);
        for (const [name, value] of Object.entries(spec.attrs || {})) {
          if (name.toLowerCase().startsWith('on')) continue;
          node.setAttribute(name, value);
        }
        if (spec.text !== undefined) node.textContent = spec.text;
        for (const child of spec.children || []) node.appendChild(buildNode(child));
        return node;
      }

      function statusNode(text, cssClass, withCursor) {
        const children = [];
        if (withCursor) children.push({ tag: 'span', attrs: { class: 'blink' }, text: '_' });
        return buildNode({
          tag: 'p',
          attrs: { class: 'status-text' },
          children: [{ tag: 'span', attrs: { class: cssClass }, text, children }]
        });
      }

      function showStatus(status) {
        if (!status) return;
        clearTimeout(typingTimer);
        const frames = status.frames || [];
        if (frames.length === 0) {
          statusDisplay.replaceChildren(statusNode(status.text, status.css_class, false));
          return;
        }
        let index = 0;
        const type = () => {
          if (index < frames.length) {
            statusDisplay.replaceChildren(statusNode(frames[index], status.css_class, true));
            index++;
            typingTimer = setTimeout(type, status.delay_ms);
          } else {
            statusDisplay.replaceChildren(statusNode(status.text, status.css_class, false));
          }
        };
        type();
      }

      function animateCounter(counter) {
        let index = 0;
        const timer = setInterval(() => {
          jobCountDisplay.textContent = counter.frames[index];
          index++;
          if (index >= counter.frames.length) clearInterval(timer);
        }, counter.tick_ms);
      }

      function showError(spec) {
        const node = buildNode(spec);
        statusDisplay.appendChild(node);
        setTimeout(() => node.remove(), Number(spec.attrs['data-dismiss-after-ms']));
      }

      async function performSearch() {
        if (searchBtn.disabled) return;
        searchBtn.disabled = true;
        if (queryInput.value.trim()) {
          showStatus({ text: 'SEARCHING...', css_class: 'status-searching', frames: [] });
        }
        try {
          const response = await fetch('/ui/search', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({
              query: queryInput.value,
              location: locationInput.value,
              job_count: jobCount
            })
          });
          const data = await response.json();
          if (!response.ok) throw new Error(data.error || 'request failed');
          if (data.transitions.length) showStatus(data.status);
          if (data.results) resultsContainer.replaceChildren(...data.results.map(buildNode));
          if (data.message) showError(data.message);
          jobCount = data.job_count;
          animateCounter(data.counter);
        } catch (error) {
          showStatus({ text: 'SYSTEM STATUS: ERROR', css_class: 'status-ready', frames: [] });
          showError({
            tag: 'div',
            attrs: { class: 'error-message', 'data-dismiss-after-ms': '5000' },
            text: 'ERROR: SEARCH FAILED - ' + error.message
          });
        } finally {
          searchBtn.disabled = false;
        }
      }

      searchBtn.addEventListener('click', performSearch);
      for (const input of [queryInput, locationInput]) {
        input.addEventListener('keypress', (event) => {
          if (event.key === 'Enter') performSearch();
        });
      }
      document.addEventListener('keydown', (event) => {
        if ((event.ctrlKey || event.metaKey) && event.key === 'k') {
          event.preventDefault();
          queryInput.focus();
        }
      });

      fetch('/ui/state')
        .then((response) => response.json())
        .then((data) => showStatus(data.status));
    </script>
  </body>
</html>
"""


def index_html() -> str:
    return INDEX_HTML
