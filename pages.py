# ---------------- LOGIN PAGE TEMPLATE ----------------

LOGIN_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
<title>Login - Subscription Manager</title>
<meta name="viewport" content="width=device-width, initial-scale=1.0, maximum-scale=1.0, user-scalable=yes">
<link href="https://fonts.googleapis.com/css2?family=Poppins:wght@300;400;600&display=swap" rel="stylesheet">
<style>
*{margin:0;padding:0;box-sizing:border-box;font-family:'Poppins',sans-serif;}
body{background:linear-gradient(135deg,#667eea,#764ba2);min-height:100vh;display:flex;align-items:center;justify-content:center;padding:20px;}
.login-card{width:100%;max-width:400px;background:white;padding:40px;border-radius:20px;box-shadow:0 20px 40px rgba(0,0,0,0.2);}
h2{text-align:center;color:#333;margin-bottom:30px;font-size:28px;}
.form-group{margin-bottom:20px;}
label{display:block;margin-bottom:5px;color:#555;font-weight:500;}
input[type=email],input[type=password]{width:100%;padding:12px;border:2px solid #e0e0e0;border-radius:10px;font-size:14px;transition:all 0.3s;}
input:focus{outline:none;border-color:#667eea;}
.remember{display:flex;align-items:center;gap:8px;color:#555;margin-bottom:20px;}
button{width:100%;padding:14px;background:#667eea;color:white;border:none;border-radius:10px;font-size:16px;font-weight:600;cursor:pointer;transition:all 0.3s;}
button:hover{background:#5a67d8;transform:translateY(-2px);box-shadow:0 5px 15px rgba(102,126,234,0.4);}
button:disabled{opacity:0.6;cursor:default;transform:none;}
.message{padding:12px;border-radius:8px;margin-bottom:20px;text-align:center;display:none;}
.error{background:#fed7d7;color:#742a2a;border:1px solid #feb2b2;}

@media(max-width:480px){
    .login-card{padding:25px;}
    h2{font-size:24px;}
    button{padding:12px;}
}
</style>
</head>
<body>
<div class="login-card">
    <h2>🔐 Subscription Manager</h2>

    <div id="error" class="message error"></div>

    <form id="login-form">
        <div class="form-group">
            <label>Email</label>
            <input type="email" name="email" required autocomplete="username">
        </div>
        <div class="form-group">
            <label>Password</label>
            <input type="password" name="password" required autocomplete="current-password">
        </div>
        <label class="remember">
            <input type="checkbox" name="rememberMe"> Remember me for 30 days
        </label>
        <button type="submit" id="login-btn">Login</button>
    </form>
</div>

<script>
document.getElementById('login-form').addEventListener('submit', async (e) => {
    e.preventDefault();
    const form = e.target;
    const errorBox = document.getElementById('error');
    const button = document.getElementById('login-btn');
    errorBox.style.display = 'none';
    button.disabled = true;

    try {
        const res = await fetch('/api/login', {
            method: 'POST',
            headers: {'Content-Type': 'application/json'},
            body: JSON.stringify({
                email: form.email.value,
                password: form.password.value,
                rememberMe: form.rememberMe.checked,
            }),
        });
        const data = await res.json();
        if (res.ok) {
            window.location.href = '/dashboard';
            return;
        }
        errorBox.textContent = data.error || 'Login failed';
    } catch (err) {
        errorBox.textContent = 'An error occurred. Please try again.';
    }
    errorBox.style.display = 'block';
    button.disabled = false;
});
</script>
</body>
</html>
"""

# ---------------- SHARED PAGE STYLE ----------------

BASE_STYLE = """
* {
    margin: 0;
    padding: 0;
    box-sizing: border-box;
    font-family: 'Poppins', sans-serif;
}

body {
    background: linear-gradient(135deg, #667eea, #764ba2);
    min-height: 100vh;
    padding: 20px;
}

.header {
    background: rgba(0, 0, 0, 0.7);
    color: white;
    padding: 15px 20px;
    border-radius: 15px;
    margin-bottom: 20px;
    display: flex;
    justify-content: space-between;
    align-items: center;
    flex-wrap: wrap;
    gap: 10px;
}

.header h3 {
    font-size: 18px;
}

.header-actions {
    display: flex;
    gap: 10px;
}

.nav-btn {
    background: #48bb78;
    color: white;
    padding: 8px 15px;
    border: none;
    border-radius: 8px;
    cursor: pointer;
    text-decoration: none;
    font-size: 14px;
    font-weight: 600;
}

.logout-btn {
    background: #f56565;
}

.input-field {
    width: 100%;
    padding: 12px;
    border: 2px solid #e0e0e0;
    border-radius: 10px;
    font-size: 14px;
}

.input-field:focus {
    outline: none;
    border-color: #667eea;
}

.form-grid {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(220px, 1fr));
    gap: 15px;
    margin-bottom: 20px;
}

.input-label {
    display: block;
    margin-bottom: 5px;
    color: #555;
    font-weight: 500;
}

.submit-btn {
    width: 100%;
    padding: 14px;
    background: #667eea;
    color: white;
    border: none;
    border-radius: 10px;
    font-size: 16px;
    font-weight: 600;
    cursor: pointer;
}

.submit-btn:disabled {
    opacity: 0.6;
    cursor: default;
}

.error-message {
    background: #fed7d7;
    color: #742a2a;
    border: 1px solid #feb2b2;
    padding: 12px;
    border-radius: 8px;
    margin-bottom: 20px;
    text-align: center;
    display: none;
}
"""

# ---------------- DASHBOARD PAGE ----------------

DASHBOARD_PAGE = """
<!DOCTYPE html>
<html>
<head>
<title>Dashboard - Subscription Manager</title>
<meta name="viewport" content="width=device-width, initial-scale=1.0, maximum-scale=1.0, user-scalable=yes">
<link href="https://fonts.googleapis.com/css2?family=Poppins:wght@300;400;600&display=swap" rel="stylesheet">
<style>
{{ base_style|safe }}

.toolbar {
    display: flex;
    justify-content: space-between;
    align-items: center;
    gap: 15px;
    margin-bottom: 20px;
    color: white;
    flex-wrap: wrap;
}

.toolbar .input-field {
    max-width: 320px;
}

.entries-grid {
    display: grid;
    grid-template-columns: repeat(auto-fill, minmax(280px, 1fr));
    gap: 15px;
}

.entry-card {
    background: rgba(255, 255, 255, 0.25);
    backdrop-filter: blur(15px);
    border: 1px solid rgba(255, 255, 255, 0.1);
    border-radius: 15px;
    padding: 15px;
    color: white;
}

.entry-top {
    display: flex;
    justify-content: space-between;
    align-items: center;
    font-size: 12px;
    opacity: 0.9;
    margin-bottom: 10px;
}

.entry-field {
    display: flex;
    justify-content: space-between;
    gap: 10px;
    padding: 6px 0;
    border-bottom: 1px solid rgba(255, 255, 255, 0.15);
    font-size: 14px;
    word-break: break-all;
}

.field-label {
    opacity: 0.8;
}

.icon-btn {
    background: transparent;
    border: none;
    cursor: pointer;
    font-size: 16px;
}

.entry-actions {
    display: flex;
    justify-content: flex-end;
    gap: 8px;
    margin-top: 10px;
}

.empty-state {
    text-align: center;
    padding: 40px 20px;
    color: white;
    opacity: 0.9;
}

.modal {
    display: none;
    position: fixed;
    top: 0;
    left: 0;
    right: 0;
    bottom: 0;
    background: rgba(0,0,0,0.5);
    align-items: center;
    justify-content: center;
    z-index: 1000;
    padding: 20px;
}

.modal-content {
    background: white;
    padding: 30px;
    border-radius: 20px;
    max-width: 560px;
    width: 100%;
}

.modal-content.small {
    max-width: 300px;
    text-align: center;
}

.modal-content h3 {
    color: #333;
    margin-bottom: 15px;
}

.modal-content p {
    color: #666;
    margin-bottom: 20px;
}

.modal-buttons {
    display: flex;
    gap: 10px;
}

.modal-btn {
    flex: 1;
    padding: 12px;
    border: none;
    border-radius: 8px;
    cursor: pointer;
    font-weight: 600;
}

.confirm-btn {
    background: #f56565;
    color: white;
}

.save-btn {
    background: #667eea;
    color: white;
}

.cancel-btn {
    background: #e0e0e0;
    color: #333;
}
</style>
</head>
<body>

<div class="header">
    <h3>📋 LSBD Subscription Manager</h3>
    <div class="header-actions">
        <a href="/add" class="nav-btn">+ Add Entry</a>
        <button onclick="logout()" class="nav-btn logout-btn">Logout</button>
    </div>
</div>

<div class="toolbar">
    <h2>Dashboard</h2>
    <input type="text" id="searchInput" class="input-field" placeholder="Search by email or mobile...">
</div>

<div id="entries" class="entries-grid"></div>
<div id="emptyState" class="empty-state">⏳ Loading entries...</div>

<!-- Edit Modal -->
<div id="editModal" class="modal">
    <div class="modal-content">
        <h3>✏️ Edit Entry</h3>
        <form id="editForm">
            <div class="form-grid">
                <div>
                    <label class="input-label">Gmail *</label>
                    <input type="email" name="gmail" class="input-field" required>
                </div>
                <div>
                    <label class="input-label">Password *</label>
                    <input type="text" name="password" class="input-field" required>
                </div>
                <div>
                    <label class="input-label">Start Date *</label>
                    <input type="date" name="startDate" class="input-field" required>
                </div>
                <div>
                    <label class="input-label">End Date *</label>
                    <input type="date" name="endDate" class="input-field" required>
                </div>
                <div>
                    <label class="input-label">Account No *</label>
                    <select name="accountNo" class="input-field" required>
                        <option value="1">Account 1</option>
                        <option value="2">Account 2</option>
                    </select>
                </div>
                <div>
                    <label class="input-label">Mobile Number *</label>
                    <input type="tel" name="mobileNumber" class="input-field" required>
                </div>
            </div>
            <div class="modal-buttons">
                <button type="submit" class="modal-btn save-btn">Save Changes</button>
                <button type="button" onclick="hideModal('editModal')" class="modal-btn cancel-btn">Cancel</button>
            </div>
        </form>
    </div>
</div>

<!-- Delete Confirmation Modal -->
<div id="deleteModal" class="modal">
    <div class="modal-content small">
        <h3>🗑️ Delete Entry</h3>
        <p>Are you sure you want to delete this entry? This action cannot be undone.</p>
        <div class="modal-buttons">
            <button onclick="confirmDelete()" class="modal-btn confirm-btn">Yes, Delete</button>
            <button onclick="hideModal('deleteModal')" class="modal-btn cancel-btn">Cancel</button>
        </div>
    </div>
</div>

<script>
const SHARE_TEMPLATE = {{ share_template|tojson }};
const FIELDS = {{ fields|tojson }};

let entries = [];
let searchTerm = '';
let editingId = null;
let deletingId = null;
const visiblePasswords = new Set();
const copiedEntries = new Set();

function escapeHtml(value) {
    const div = document.createElement('div');
    div.textContent = value == null ? '' : String(value);
    return div.innerHTML;
}

function formatDate(value) {
    const d = new Date(value);
    if (isNaN(d)) return value;
    return d.toLocaleDateString('en-US', {year: 'numeric', month: 'short', day: 'numeric'});
}

function formatDayMonthYear(value) {
    const m = /^(\\d{4})-(\\d{2})-(\\d{2})/.exec(value || '');
    return m ? `${m[3]}/${m[2]}/${m[1]}` : value;
}

function matchesSearch(entry, term) {
    return entry.gmail.toLowerCase().includes(term.toLowerCase()) ||
        entry.mobileNumber.includes(term);
}

function shareMessage(template, entry) {
    return template
        .replace('{gmail}', () => entry.gmail)
        .replace('{password}', () => entry.password)
        .replace('{accountNo}', () => entry.accountNo)
        .replace('{endDate}', () => formatDayMonthYear(entry.endDate));
}

async function fetchEntries() {
    try {
        const res = await fetch('/api/entries');
        if (res.status === 401) {
            window.location.href = '/login';
            return;
        }
        const data = await res.json();
        entries = data.entries || [];
    } catch (err) {
        console.error('Failed to fetch entries:', err);
    }
    render();
}

function render() {
    const container = document.getElementById('entries');
    const empty = document.getElementById('emptyState');
    const filtered = entries.filter(entry => matchesSearch(entry, searchTerm));

    if (filtered.length === 0) {
        container.innerHTML = '';
        empty.innerHTML = searchTerm
            ? '<p>No entries match your search criteria</p>'
            : '<p>📭 No entries yet</p><p>Start by adding your first subscription entry</p>' +
              '<br><a href="/add" class="nav-btn">Add First Entry</a>';
        empty.style.display = 'block';
        return;
    }

    empty.style.display = 'none';
    container.innerHTML = filtered.map(entry => {
        const id = escapeHtml(entry.id);
        const shown = visiblePasswords.has(entry.id);
        const password = shown ? escapeHtml(entry.password) : '•'.repeat(entry.password.length);
        return `
        <div class="entry-card">
            <div class="entry-top">
                <span>${escapeHtml(formatDate(entry.createdAt))}</span>
                <button class="icon-btn" title="Copy all details" onclick="copyDetails('${id}')">
                    ${copiedEntries.has(entry.id) ? '✓' : '📋'}
                </button>
            </div>
            <div class="entry-field"><span class="field-label">Gmail</span><span>${escapeHtml(entry.gmail)}</span></div>
            <div class="entry-field">
                <span class="field-label">Password</span>
                <span>${password}
                    <button class="icon-btn" title="${shown ? 'Hide password' : 'Show password'}"
                            onclick="togglePassword('${id}')">${shown ? '🙈' : '👁️'}</button>
                </span>
            </div>
            <div class="entry-field"><span class="field-label">Mobile</span><span>${escapeHtml(entry.mobileNumber)}</span></div>
            <div class="entry-field"><span class="field-label">Account No</span><span>${escapeHtml(entry.accountNo)}</span></div>
            <div class="entry-field">
                <span class="field-label">Start → End</span>
                <span>${escapeHtml(formatDate(entry.startDate))} → ${escapeHtml(formatDate(entry.endDate))}</span>
            </div>
            <div class="entry-actions">
                <button class="icon-btn" title="Edit" onclick="openEdit('${id}')">✏️</button>
                <button class="icon-btn" title="Delete" onclick="openDelete('${id}')">🗑️</button>
            </div>
        </div>`;
    }).join('');
}

function findEntry(id) {
    return entries.find(e => e.id === id);
}

function togglePassword(id) {
    if (visiblePasswords.has(id)) {
        visiblePasswords.delete(id);
    } else {
        visiblePasswords.add(id);
    }
    render();
}

async function copyDetails(id) {
    const entry = findEntry(id);
    if (!entry) return;
    const message = shareMessage(SHARE_TEMPLATE, entry);

    try {
        await navigator.clipboard.writeText(message);
        copiedEntries.add(id);
        render();
        setTimeout(() => {
            copiedEntries.delete(id);
            render();
        }, 2000);
    } catch (err) {
        alert('Failed to copy details');
    }
}

function hideModal(name) {
    document.getElementById(name).style.display = 'none';
}

function openEdit(id) {
    const entry = findEntry(id);
    if (!entry) return;
    editingId = id;
    const form = document.getElementById('editForm');
    FIELDS.forEach(field => { form.elements[field].value = entry[field] || ''; });
    document.getElementById('editModal').style.display = 'flex';
}

document.getElementById('editForm').addEventListener('submit', async (e) => {
    e.preventDefault();
    if (!editingId) return;
    const form = e.target;
    const payload = {id: editingId};
    FIELDS.forEach(field => { payload[field] = form.elements[field].value; });

    try {
        const res = await fetch('/api/entries', {
            method: 'PATCH',
            headers: {'Content-Type': 'application/json'},
            body: JSON.stringify(payload),
        });
        if (res.ok) {
            editingId = null;
            hideModal('editModal');
            fetchEntries();
        } else {
            alert('Failed to update entry');
        }
    } catch (err) {
        alert('An error occurred while updating');
    }
});

function openDelete(id) {
    deletingId = id;
    document.getElementById('deleteModal').style.display = 'flex';
}

async function confirmDelete() {
    const id = deletingId;
    deletingId = null;
    hideModal('deleteModal');
    if (!id) return;

    try {
        const res = await fetch('/api/entries?id=' + encodeURIComponent(id), {method: 'DELETE'});
        if (res.ok) {
            fetchEntries();
        } else {
            alert('Failed to delete entry');
        }
    } catch (err) {
        alert('An error occurred while deleting');
    }
}

async function logout() {
    await fetch('/api/logout', {method: 'POST'});
    window.location.href = '/login';
}

// Live search as you type
document.getElementById('searchInput').addEventListener('input', (e) => {
    searchTerm = e.target.value;
    render();
});

fetchEntries();
</script>

</body>
</html>
"""

# ---------------- ADD ENTRY PAGE ----------------

ADD_ENTRY_PAGE = """
<!DOCTYPE html>
<html>
<head>
<title>Add Entry - Subscription Manager</title>
<meta name="viewport" content="width=device-width, initial-scale=1.0, maximum-scale=1.0, user-scalable=yes">
<link href="https://fonts.googleapis.com/css2?family=Poppins:wght@300;400;600&display=swap" rel="stylesheet">
<style>
{{ base_style|safe }}

.form-container {
    background: white;
    border-radius: 20px;
    padding: 30px;
    max-width: 700px;
    margin: 0 auto;
    box-shadow: 0 20px 40px rgba(0,0,0,0.2);
}

.form-container h2 {
    color: #333;
    margin-bottom: 20px;
}

.success-card {
    display: none;
    background: white;
    border-radius: 20px;
    padding: 40px;
    max-width: 400px;
    margin: 0 auto;
    text-align: center;
}

.success-icon {
    font-size: 48px;
    color: #48bb78;
    margin-bottom: 10px;
}
</style>
</head>
<body>

<div class="header">
    <h3>📋 LSBD Subscription Manager</h3>
    <div class="header-actions">
        <a href="/dashboard" class="nav-btn">← Dashboard</a>
        <button onclick="logout()" class="nav-btn logout-btn">Logout</button>
    </div>
</div>

<div id="successCard" class="success-card">
    <div class="success-icon">✓</div>
    <h3>Entry Added Successfully!</h3>
    <p>Redirecting to dashboard...</p>
</div>

<div id="formContainer" class="form-container">
    <h2>➕ Add New Entry</h2>
    <div id="error" class="error-message"></div>

    <form id="addForm">
        <div class="form-grid">
            <div>
                <label for="gmail" class="input-label">Gmail *</label>
                <input id="gmail" name="gmail" type="email" class="input-field" placeholder="example@gmail.com" required>
            </div>
            <div>
                <label for="password" class="input-label">Password *</label>
                <input id="password" name="password" type="text" class="input-field" required>
            </div>
            <div>
                <label for="startDate" class="input-label">Start Date *</label>
                <input id="startDate" name="startDate" type="date" class="input-field" value="{{ start_date }}" required>
            </div>
            <div>
                <label for="endDate" class="input-label">End Date *</label>
                <input id="endDate" name="endDate" type="date" class="input-field" value="{{ end_date }}" required>
            </div>
            <div>
                <label for="accountNo" class="input-label">Account No *</label>
                <select id="accountNo" name="accountNo" class="input-field" required>
                    <option value="1">Account 1</option>
                    <option value="2">Account 2</option>
                </select>
            </div>
            <div>
                <label for="mobileNumber" class="input-label">Mobile Number *</label>
                <input id="mobileNumber" name="mobileNumber" type="tel" class="input-field" placeholder="01XXXXXXXXX" required>
            </div>
        </div>
        <button type="submit" id="submitBtn" class="submit-btn">Add Entry</button>
    </form>
</div>

<script>
const FIELDS = {{ fields|tojson }};
const TERM_DAYS = {{ term_days }};
const REDIRECT_DELAY = 1500;

function deriveEndDate(value, days) {
    const end = new Date(value + 'T00:00:00Z');
    end.setUTCDate(end.getUTCDate() + days);
    return end.toISOString().split('T')[0];
}

// End date follows start date; editing end date by hand does not feed back
document.getElementById('startDate').addEventListener('change', (e) => {
    if (!e.target.value) return;
    document.getElementById('endDate').value = deriveEndDate(e.target.value, TERM_DAYS);
});

document.getElementById('addForm').addEventListener('submit', async (e) => {
    e.preventDefault();
    const form = e.target;
    const errorBox = document.getElementById('error');
    const button = document.getElementById('submitBtn');
    errorBox.style.display = 'none';
    button.disabled = true;
    button.textContent = 'Adding...';

    const payload = {};
    FIELDS.forEach(field => { payload[field] = form.elements[field].value; });

    try {
        const res = await fetch('/api/entries', {
            method: 'POST',
            headers: {'Content-Type': 'application/json'},
            body: JSON.stringify(payload),
        });
        const data = await res.json();
        if (res.ok) {
            document.getElementById('formContainer').style.display = 'none';
            document.getElementById('successCard').style.display = 'block';
            setTimeout(() => { window.location.href = '/dashboard'; }, REDIRECT_DELAY);
            return;
        }
        errorBox.textContent = data.error || 'Failed to add entry';
    } catch (err) {
        errorBox.textContent = 'An error occurred. Please try again.';
    }
    errorBox.style.display = 'block';
    button.disabled = false;
    button.textContent = 'Add Entry';
});

async function logout() {
    await fetch('/api/logout', {method: 'POST'});
    window.location.href = '/login';
}
</script>

</body>
</html>
"""
